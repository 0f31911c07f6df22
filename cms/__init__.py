"""CMS Backend: a content management REST API built on FastAPI and SQLModel."""
