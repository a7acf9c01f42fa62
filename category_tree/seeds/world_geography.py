"""World Geography seed structures"""

STRUCTURE = [
    {
        "name": "World Geography",
        "subcategories": [
            {
                "name": "Continents & Countries",
                "chapters": [
                    {"name": "Physical Division of Continents", "order": 1},
                    {"name": "Geological Formation of Continents", "order": 2},
                    {"name": "Continental Drift Theory", "order": 3},
                    {"name": "Plate Tectonics and Continental Movement", "order": 4},
                    {"name": "Major Physiographic Features of Each Continent", "order": 5},
                ],
            },
            {
                "name": "Asia",
                "chapters": [
                    {"name": "Physical Geography of Asia", "order": 1},
                    {"name": "Climatic Regions of Asia", "order": 2},
                    {"name": "Population & Cultural Regions", "order": 3},
                    {"name": "Important Countries and Capitals", "order": 4},
                    {"name": "Natural Resources of Asia", "order": 5},
                ],
            },
            {
                "name": "Africa",
                "chapters": [
                    {"name": "Physiography of Africa", "order": 1},
                    {"name": "Climatic Zones of Africa", "order": 2},
                    {"name": "Major Rivers and Lakes", "order": 3},
                    {"name": "Mineral Resources", "order": 4},
                    {"name": "African Countries and Capitals", "order": 5},
                ],
            },
            {
                "name": "Europe",
                "chapters": [
                    {"name": "Physical Features of Europe", "order": 1},
                    {"name": "Climate and Vegetation", "order": 2},
                    {"name": "Industrial Regions of Europe", "order": 3},
                    {"name": "Political Division and Countries", "order": 4},
                    {"name": "Economic Geography of Europe", "order": 5},
                ],
            },
            {
                "name": "North America",
                "chapters": [
                    {"name": "Physiographic Divisions", "order": 1},
                    {"name": "Drainage System", "order": 2},
                    {"name": "Climatic Regions", "order": 3},
                    {"name": "Major Countries and Capitals", "order": 4},
                    {"name": "Economic Resources", "order": 5},
                ],
            },
            {
                "name": "South America",
                "chapters": [
                    {"name": "Relief Features", "order": 1},
                    {"name": "Climate and Natural Vegetation", "order": 2},
                    {"name": "River Systems", "order": 3},
                    {"name": "Countries and Capitals", "order": 4},
                    {"name": "Agriculture and Minerals", "order": 5},
                ],
            },
            {
                "name": "Australia",
                "chapters": [
                    {"name": "Physiography", "order": 1},
                    {"name": "Climate Patterns", "order": 2},
                    {"name": "Natural Vegetation", "order": 3},
                    {"name": "Economic Resources", "order": 4},
                    {"name": "Political Geography", "order": 5},
                ],
            },
            {
                "name": "Antarctica",
                "chapters": [
                    {"name": "Physical Features", "order": 1},
                    {"name": "Climate of Antarctica", "order": 2},
                    {"name": "Ice Sheets and Glaciers", "order": 3},
                    {"name": "Scientific Research Stations", "order": 4},
                    {"name": "Importance of Antarctica", "order": 5},
                ],
            },
            {
                "name": "Major Rivers, Mountains & Deserts",
                "chapters": [
                    {"name": "River Systems of Asia", "order": 1},
                    {"name": "River Systems of Africa", "order": 2},
                    {"name": "River Systems of Europe", "order": 3},
                    {"name": "River Systems of North America", "order": 4},
                    {"name": "River Systems of South America", "order": 5},
                ],
            },
            {
                "name": "Major Mountain Ranges",
                "chapters": [
                    {"name": "Fold Mountains of the World", "order": 1},
                    {"name": "Block Mountains", "order": 2},
                    {"name": "Volcanic Mountains", "order": 3},
                    {"name": "Himalayan Mountain System", "order": 4},
                    {"name": "Andes, Rockies, Alps, Atlas", "order": 5},
                ],
            },
            {
                "name": "Plateaus of the World",
                "chapters": [
                    {"name": "Types of Plateaus", "order": 1},
                    {"name": "Important Plateaus of the World", "order": 2},
                    {"name": "Economic Importance of Plateaus", "order": 3},
                ],
            },
            {
                "name": "Deserts of the World",
                "chapters": [
                    {"name": "Hot Deserts", "order": 1},
                    {"name": "Cold Deserts", "order": 2},
                    {"name": "Major Deserts (Sahara, Gobi, Kalahari, Atacama, etc.)", "order": 3},
                    {"name": "Climate and Vegetation of Deserts", "order": 4},
                    {"name": "Human Life in Deserts", "order": 5},
                ],
            },
            {
                "name": "Important Straits & Lakes",
                "chapters": [
                    {"name": "Meaning and Importance of Straits", "order": 1},
                    {"name": "Classification of Straits (Geographical / Regional)", "order": 2},
                    {"name": "Strategic Importance of Straits", "order": 3},
                ],
            },
            {
                "name": "Important Lakes of the World",
                "chapters": [
                    {"name": "Types of Lakes", "order": 1},
                    {"name": "Major Lakes by Continent", "order": 2},
                    {"name": "Economic and Ecological Importance of Lakes", "order": 3},
                ],
            },
            {
                "name": "World Climate Patterns",
                "chapters": [
                    {"name": "Basics of Climate", "order": 1},
                    {"name": "Climate Classification", "order": 2},
                    {"name": "Major Climate Types", "order": 3},
                    {"name": "Winds & Pressure Systems", "order": 4},
                    {"name": "Ocean Currents", "order": 5},
                ],
            },
            {
                "name": "Geophysical Phenomena",
                "chapters": [
                    {"name": "Earthquakes (Structure of the Earth, Causes of Earthquakes, Earthquake Zones of the World, etc.)", "order": 1},
                    {"name": "Volcanoes (Types of Volcanoes, Volcanic Landforms, Benefits & Hazards, etc.)", "order": 2},
                    {"name": "Cyclones (Types of Cyclones, Cyclone-Prone Regions, Formation & Structure, etc.)", "order": 3},
                    {"name": "Tsunami (Causes, Tsunami-Prone Areas, Effects & Case Studies, etc.)", "order": 4},
                    {"name": "Landslides (Causes, Prevention & Mitigation, Landslide-Prone Regions, etc.)", "order": 5},
                ],
            },
        ],
    },
    {
        "name": "Map Work",
        "subcategories": [],
        "chapters": [
            {"name": "India and World Map Practice", "order": 1},
            {"name": "Neighbouring Countries, Capitals", "order": 2},
            {"name": "Important Locations in News", "order": 3},
        ],
    },
]
