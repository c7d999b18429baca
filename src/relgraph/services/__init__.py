"""Service layer — engine queries wrapped in ServiceResult.

Services may import from engines, domain, and config.
Engine exceptions that describe a bad query become structured errors here.
"""
