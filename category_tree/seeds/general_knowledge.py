"""General Knowledge / Static GK seed structure"""

STRUCTURE = [
    {
        "name": "General Knowledge / Static GK",
        "description": "Comprehensive General Knowledge and Static GK topics",
        "subcategories": [
            {
                "name": "Indian States & Capitals",
                "chapters": [],
            },
            {
                "name": "National Symbols",
                "chapters": [],
            },
            {
                "name": "Important Days",
                "chapters": [],
            },
            {
                "name": "World Heritage Sites",
                "chapters": [],
            },
            {
                "name": "Dams, Rivers, Power Plants",
                "chapters": [],
            },
            {
                "name": "Awards (Bharat Ratna, Nobel, etc.)",
                "chapters": [],
            },
            {
                "name": "Books & Authors",
                "chapters": [],
            },
            {
                "name": "Famous Personalities",
                "chapters": [
                    {"name": "Freedom Fighter", "order": 1},
                    {"name": "Politician", "order": 2},
                    {"name": "Scientist", "order": 3},
                    {"name": "Industrialists & Entrepreneurs", "order": 4},
                    {"name": "Social Reformers & Religious Leaders", "order": 5},
                    {"name": "Writers, Poets & Thinkers", "order": 6},
                    {"name": "Artists, Musicians & Dancers", "order": 7},
                    {"name": "Sportspersons", "order": 8},
                    {"name": "Judges & Legal Luminaries", "order": 9},
                    {"name": "Internationally Renowned Indians", "order": 10},
                ],
            },
            {
                "name": "Param Veer Chakra",
                "chapters": [],
            },
        ],
    },
]
