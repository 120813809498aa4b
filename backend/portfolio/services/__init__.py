"""
Portfolio Backend — Services Layer
====================================

What:  Business logic between the routes (HTTP) and the models (persistence).
How:   Each service is a stateless class with a module-level singleton. Routes
       pass in the request's AsyncSession; services never commit, the
       get_db_session dependency does that once per request.

Service Inventory:
    - CareerService, SkillService, StationService, EducationService: CRUD
    - SeedService: fills empty tables with the portfolio content
    - AdminGate: shared-secret check for admin writes
    - AirQualityProvider (abstract) / AqicnService: live AQI readings
    - ContactService: validates, rate limits and mails contact messages
"""
