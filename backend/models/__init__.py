"""
SQLAlchemy database instance and model imports.

`from models import db` gives access to the shared db instance, and
`from models import User` to the model class.
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Import models so they register with SQLAlchemy metadata
from models.user import User  # noqa: E402, F401
