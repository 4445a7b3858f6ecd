"""
messagely package

Backend for the message.ly messaging service. It includes:

- FastAPI application (`main.py`) and routers (`routes/`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Credential store (`users.py`) and message queries (`messages.py`)
- Password hashing and JWT logic (`auth.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
