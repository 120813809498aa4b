"""
Portfolio Backend — API Routes Package
========================================

Route Inventory:
    - career.py:    GET  /api/career
    - skills.py:    GET  /api/skills
    - stations.py:  GET  /api/stations
    - education.py: GET  /api/education
    - admin.py:     POST /api/admin/verify, POST /api/admin/init-db,
                    POST/PUT/DELETE /api/admin/{career,skills,stations,education}
    - aqicn.py:     GET  /api/aqicn/stations, GET /api/aqicn/station/{uid}
    - contact.py:   POST /api/contact
    - health.py:    GET  /api/health

Routes are THIN: they read the request, call one service and shape the
response. Status codes for failures come from the exception handlers.
"""
