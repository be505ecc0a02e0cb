"""
Authentication module for the hospital administration API.

This module provides authentication and authorization functionality including:
- User registration and login with bcrypt-hashed passwords
- Profile read/update and password change
- JWT bearer token authentication
- Role-based access control
"""
