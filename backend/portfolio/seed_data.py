"""
Portfolio Backend — Seed Content
==================================

What:  The portfolio's initial content: career history, skills, demo
       air-quality stations and education.
Who:   Inserted by SeedService on an empty database (startup or
       POST /api/admin/init-db). After seeding, edits go through the admin API.

Coordinates are [lng, lat]. Station readings are a fixed snapshot so the
demo dashboard renders the same without a live AQICN token.
"""

from typing import Any, Dict, List

CAREER_POSITIONS: List[Dict[str, Any]] = [
    {
        "title": "GIS/IT Manager",
        "company": "PASA (Pedernales Area Sustainable Agriculture)",
        "location": "College Station, TX",
        "start_date": "2006-08",
        "end_date": "2012-05",
        "coordinates": (-96.3344, 30.6280),
        "accomplishments": [
            "Built first GIS data platform for regional agricultural planning",
            "Managed IT infrastructure for multi-county organization",
            "Developed custom mapping applications for field staff",
        ],
    },
    {
        "title": "GIS Manager",
        "company": "TRC Companies, Inc.",
        "location": "Austin, TX",
        "start_date": "2012-06",
        "end_date": "2018-03",
        "coordinates": (-97.7431, 30.2672),
        "accomplishments": [
            "Led GIS team supporting environmental consulting projects",
            "Architected enterprise geodatabase for multi-state operations",
            "Implemented automated QA/QC workflows reducing errors by 40%",
        ],
    },
    {
        "title": "Solutions Engineer",
        "company": "Fulcrum (Spatial Networks)",
        "location": "Remote",
        "start_date": "2018-04",
        "end_date": "2020-08",
        "coordinates": (-107.8801, 37.2753),
        "accomplishments": [
            "Designed custom mobile data collection solutions",
            "Built integrations connecting field data to enterprise systems",
            "Supported Fortune 500 clients with spatial data workflows",
        ],
    },
    {
        "title": "Senior Solutions Architect",
        "company": "TRC Companies, Inc.",
        "location": "Remote (Bayfield, CO)",
        "start_date": "2020-09",
        "end_date": "2022-09",
        "coordinates": (-107.5981, 37.2247),
        "accomplishments": [
            "Architected cloud-native environmental monitoring platform",
            "Led technical delivery for $2M+ digital transformation initiative",
            "Established DevOps practices and CI/CD pipelines",
        ],
    },
    {
        "title": "Technical Director, EV Digital",
        "company": "TRC Companies, Inc.",
        "location": "Remote (Bayfield, CO)",
        "start_date": "2022-10",
        "end_date": None,
        "coordinates": (-107.5981, 37.2247),
        "accomplishments": [
            "Lead architecture and delivery for digital systems",
            "Drive cross-functional delivery to move prototypes to production",
            "Own platform patterns for multi-tenant solutions",
        ],
    },
]

SKILLS: List[Dict[str, Any]] = [
    {"name": "PostgreSQL/PostGIS", "category": "Data Platforms", "proficiency": 5},
    {"name": "SQL Server", "category": "Data Platforms", "proficiency": 4},
    {"name": "ETL/Data Pipelines", "category": "Data Platforms", "proficiency": 5},
    {"name": "ArcGIS Platform", "category": "GIS/Spatial", "proficiency": 5},
    {"name": "MapLibre/Mapbox", "category": "GIS/Spatial", "proficiency": 4},
    {"name": "Spatial Data Analysis", "category": "GIS/Spatial", "proficiency": 5},
    {"name": "QGIS", "category": "GIS/Spatial", "proficiency": 4},
    {"name": "AWS", "category": "Cloud/Infrastructure", "proficiency": 4},
    {"name": "Linux Administration", "category": "Cloud/Infrastructure", "proficiency": 4},
    {"name": "Docker/Containers", "category": "Cloud/Infrastructure", "proficiency": 4},
    {"name": "React/Next.js", "category": "App Delivery", "proficiency": 4},
    {"name": "TypeScript", "category": "App Delivery", "proficiency": 4},
    {"name": "Node.js", "category": "App Delivery", "proficiency": 4},
    {"name": "Python", "category": "App Delivery", "proficiency": 3},
    {"name": "Technical Leadership", "category": "Leadership", "proficiency": 5},
]

STATIONS: List[Dict[str, Any]] = [
    {"name": "Denver - CAMP", "location": "Denver, CO", "coordinates": (-104.9876, 39.7392),
     "aqi": 42, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T10:30:00Z"},
    {"name": "Fort Collins - CSU", "location": "Fort Collins, CO", "coordinates": (-105.0844, 40.5853),
     "aqi": 35, "category": "Good", "pollutant": "Ozone", "last_updated": "2024-01-15T10:15:00Z"},
    {"name": "Boulder - Table Mesa", "location": "Boulder, CO", "coordinates": (-105.2705, 39.9936),
     "aqi": 28, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T10:45:00Z"},
    {"name": "Colorado Springs - USAFA", "location": "Colorado Springs, CO", "coordinates": (-104.8214, 38.8339),
     "aqi": 51, "category": "Moderate", "pollutant": "Ozone", "last_updated": "2024-01-15T09:30:00Z"},
    {"name": "Pueblo - Fountain", "location": "Pueblo, CO", "coordinates": (-104.6091, 38.2544),
     "aqi": 45, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T10:00:00Z"},
    {"name": "Grand Junction - Pitkin", "location": "Grand Junction, CO", "coordinates": (-108.5507, 39.0639),
     "aqi": 38, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T09:45:00Z"},
    {"name": "Durango - Riverview", "location": "Durango, CO", "coordinates": (-107.8801, 37.2753),
     "aqi": 22, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T10:30:00Z"},
    {"name": "Aspen - Pitkin County", "location": "Aspen, CO", "coordinates": (-106.8175, 39.1911),
     "aqi": 18, "category": "Good", "pollutant": "Ozone", "last_updated": "2024-01-15T10:15:00Z"},
    {"name": "Greeley - Weld Tower", "location": "Greeley, CO", "coordinates": (-104.7091, 40.4233),
     "aqi": 58, "category": "Moderate", "pollutant": "PM2.5", "last_updated": "2024-01-15T09:00:00Z"},
    {"name": "Cortez - Centennial", "location": "Cortez, CO", "coordinates": (-108.5859, 37.3489),
     "aqi": 25, "category": "Good", "pollutant": "PM2.5", "last_updated": "2024-01-15T10:00:00Z"},
]

EDUCATION: List[Dict[str, Any]] = [
    {
        "degree": "B.S.",
        "field_of_study": "Environmental Geoscience",
        "institution": "Texas A&M University",
        "location": "College Station, TX",
        "start_date": "2002-08",
        "end_date": "2006-05",
        "gpa": None,
        "coordinates": (-96.3344, 30.6280),
        "accomplishments": [],
    },
]
