"""User domain module.

Identity of students and employees: registration, authentication and
profile (name) changes. Persistence and password hashing are ports.
"""
