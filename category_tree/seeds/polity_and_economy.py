"""Polity & Governance and Indian Economy seed structures"""

STRUCTURE = [
    {
        "name": "Polity & Governance",
        "subcategories": [
            {
                "name": "Indian Constitution",
                "chapters": [
                    {"name": "Making of the Constitution", "order": 1},
                    {"name": "Preamble", "order": 2},
                    {"name": "Fundamental Rights & Duties", "order": 3},
                    {"name": "Directive Principles of State Policy (DPSP)", "order": 4},
                    {"name": "Amendment of the Constitution", "order": 5},
                    {"name": "Basic Structure Doctrine", "order": 6},
                    {"name": "Union Government", "order": 7},
                    {"name": "State Government", "order": 8},
                    {"name": "Local Government", "order": 9},
                    {"name": "Union Territories & Special Areas", "order": 10},
                    {"name": "Constitutional Bodies", "order": 11},
                    {"name": "Non-Constitutional Bodies", "order": 12},
                    {"name": "Emergency Provisions", "order": 13},
                    {"name": "Centre-State Relations", "order": 14},
                    {"name": "Special Provisions for States", "order": 15},
                    {"name": "Tribunals", "order": 16},
                    {"name": "Official Language", "order": 17},
                    {"name": "Elections", "order": 18},
                    {"name": "Rights & Liabilities", "order": 19},
                    {"name": "Current Affairs Linkage", "order": 20},
                ],
            },
            {
                "name": "Indian Political System",
                "chapters": [
                    {"name": "President, PM, Parliament", "order": 1},
                    {"name": "Judiciary (Supreme Court, High Courts)", "order": 2},
                    {"name": "Federalism", "order": 3},
                    {"name": "Elections, Political Parties", "order": 4},
                ],
            },
            {
                "name": "Governance",
                "chapters": [
                    {"name": "Policies & Schemes", "order": 1},
                    {"name": "Rights Issues (RTI, RTE)", "order": 2},
                    {"name": "Panchayati Raj", "order": 3},
                ],
            },
        ],
    },
    {
        "name": "Indian Economy",
        "subcategories": [
            {
                "name": "Basic Concepts",
                "chapters": [
                    {"name": "GDP, GNP, Inflation, Deflation", "order": 1},
                    {"name": "Fiscal and Monetary Policy", "order": 2},
                    {"name": "NPAs, GST, Budget and Economic Survey", "order": 3},
                    {"name": "RBI and Financial Institutions", "order": 4},
                ],
            },
            {
                "name": "Sectors of Economy",
                "chapters": [
                    {"name": "Agriculture and Allied Sectors", "order": 1},
                    {"name": "Industry and Infrastructure", "order": 2},
                    {"name": "Services Sector", "order": 3},
                ],
            },
            {
                "name": "Government Schemes & Reforms",
                "chapters": [
                    {"name": "Poverty Alleviation Programs", "order": 1},
                    {"name": "Rural Development Schemes", "order": 2},
                    {"name": "Start-up India, Make in India, Skill India", "order": 3},
                ],
            },
            {
                "name": "External Sector",
                "chapters": [
                    {"name": "Balance of Payment", "order": 1},
                    {"name": "Foreign Trade", "order": 2},
                    {"name": "FDI & WTO", "order": 3},
                ],
            },
        ],
    },
]
