"""Remaining category seed structures"""

STRUCTURE = [
    {
        "name": "General Science",
        "subcategories": [
            {
                "name": "Physics",
                "chapters": [
                    {"name": "Electricity & Magnetism", "order": 1},
                    {"name": "Optics", "order": 2},
                    {"name": "Motion & Laws", "order": 3},
                ],
            },
            {
                "name": "Chemistry",
                "chapters": [
                    {"name": "Matter & Its Properties", "order": 1},
                    {"name": "Periodic Table", "order": 2},
                    {"name": "Acids, Bases, Salts", "order": 3},
                ],
            },
            {
                "name": "Biology",
                "chapters": [
                    {"name": "Human Anatomy", "order": 1},
                    {"name": "Diseases & Vaccination", "order": 2},
                    {"name": "Genetics & Biotechnology", "order": 3},
                    {"name": "Ecology & Environment", "order": 4},
                ],
            },
        ],
    },
    {
        "name": "Environment & Ecology",
        "subcategories": [],
        "chapters": [
            {"name": "Ecosystem, Biodiversity", "order": 1},
            {"name": "Climate Change", "order": 2},
            {"name": "Conservation Efforts (National Parks, Wildlife Sanctuaries)", "order": 3},
            {"name": "Environmental Laws & Treaties (Paris Agreement, COPs)", "order": 4},
        ],
    },
    {
        "name": "Science & Technology",
        "subcategories": [],
        "chapters": [
            {"name": "Space Technology (ISRO Missions)", "order": 1},
            {"name": "Defence Technology", "order": 2},
            {"name": "Robotics & Nanotechnology", "order": 3},
            {"name": "Artificial Intelligence", "order": 4},
            {"name": "Biotechnology", "order": 5},
            {"name": "Internet & Cybersecurity", "order": 6},
        ],
    },
    {
        "name": "Current Affairs",
        "subcategories": [],
        "chapters": [
            {"name": "National & International News", "order": 1},
            {"name": "Government Schemes", "order": 2},
            {"name": "Committees & Reports", "order": 3},
            {"name": "Awards & Honours", "order": 4},
            {"name": "Sports Events", "order": 5},
            {"name": "Important Days & Themes", "order": 6},
        ],
    },
    {
        "name": "Indian Art & Culture",
        "subcategories": [
            {
                "name": "Indian Culture",
                "chapters": [
                    {"name": "Architecture (Temples, Stupas, Forts)", "order": 1},
                    {"name": "Indian Paintings and Sculpture", "order": 2},
                    {"name": "Indian Music and Dance Forms", "order": 3},
                    {"name": "Fairs and Festivals of India", "order": 4},
                ],
            },
            {
                "name": "Religion and Philosophy",
                "chapters": [
                    {"name": "Hinduism, Jainism, Buddhism, Islam, Sikhism", "order": 1},
                    {"name": "Cultural Institutions (Sangeet Natak Akademi, ASI)", "order": 2},
                ],
            },
        ],
    },
    {
        "name": "International Relations",
        "subcategories": [],
        "chapters": [
            {"name": "India's Relations with Neighbours", "order": 1},
            {"name": "Important International Organizations (UN, WHO, IMF, World Bank, WTO)", "order": 2},
            {"name": "Treaties & Summits (BRICS, SCO, G20)", "order": 3},
        ],
    },
]
