"""Indian History seed structure"""

STRUCTURE = [
    {
        "name": "Indian History",
        "description": "Comprehensive coverage of Indian History from ancient to modern times",
        "subcategories": [
            {
                "name": "Ancient History",
                "chapters": [
                    {"name": "Indus Valley Civilization", "order": 1},
                    {"name": "Vedic Age", "order": 2},
                    {"name": "Mahajanapadas", "order": 3},
                    {"name": "Mauryan Empire", "order": 4},
                    {"name": "Post-Maurian India (Sunga, Kushana, Gupta)", "order": 5},
                    {"name": "South Indian Dynasties (Sangam Age, Cholas, Cheras, Pandyas)", "order": 6},
                    {"name": "Religious Movements: Buddhism, Jainism", "order": 7},
                    {"name": "Art, Culture, and Architecture", "order": 8},
                ],
            },
            {
                "name": "Medieval History",
                "chapters": [
                    {"name": "Delhi Sultanate", "order": 1},
                    {"name": "Mughal Empire", "order": 2},
                    {"name": "Regional Kingdoms", "order": 3},
                    {"name": "Bhakti and Sufi Movements", "order": 4},
                    {"name": "Marathas and Sikh Empire", "order": 5},
                    {"name": "Architecture, Literature, and Cultural Developments", "order": 6},
                ],
            },
            {
                "name": "Modern History",
                "chapters": [
                    {"name": "Arrival of Europeans in India", "order": 1},
                    {"name": "British Expansion & Administration", "order": 2},
                    {"name": "Revolt of 1857", "order": 3},
                    {"name": "Social Reform Movements", "order": 4},
                    {"name": "Freedom Struggle (1885-1947)", "order": 5},
                    {"name": "Gandhian Movements", "order": 6},
                    {"name": "Partition & Independence", "order": 7},
                    {"name": "Freedom Fighters and Their Contributions", "order": 8},
                    {"name": "India Post-Independence", "order": 9},
                ],
            },
        ],
    },
]
