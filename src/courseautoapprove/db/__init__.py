# src/courseautoapprove/db/__init__.py
# Don't import the session module on package import; it builds the engine from settings
from .base import Base  # safe to import
