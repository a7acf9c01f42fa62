"""Indian Geography seed structure"""

STRUCTURE = [
    {
        "name": "Indian Geography",
        "description": "Comprehensive coverage of Indian Geography covering physical, human, and economic aspects",
        "subcategories": [
            {
                "name": "Physical Geography",
                "chapters": [
                    {"name": "Earth's Structure", "order": 1},
                    {"name": "Mountains, Plateaus, Rivers of India", "order": 2},
                    {"name": "Soil Types", "order": 3},
                    {"name": "Climate & Weather Patterns", "order": 4},
                    {"name": "Natural Vegetation", "order": 5},
                    {"name": "Mineral Resources", "order": 6},
                ],
            },
            {
                "name": "Human Geography",
                "chapters": [
                    {"name": "Population & Census Data", "order": 1},
                    {"name": "Migration Patterns", "order": 2},
                    {"name": "Urbanization", "order": 3},
                    {"name": "Agriculture & Cropping Patterns", "order": 4},
                    {"name": "Transport & Trade", "order": 5},
                ],
            },
            {
                "name": "Economic Geography",
                "chapters": [
                    {"name": "Major Industries (Iron-Steel, IT, etc.)", "order": 1},
                    {"name": "Energy Resources", "order": 2},
                    {"name": "Special Economic Zones (SEZs)", "order": 3},
                ],
            },
        ],
    },
]
