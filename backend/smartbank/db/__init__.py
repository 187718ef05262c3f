"""
smartbank.db

Package base de données : Base déclarative, engine async et sessions (Depends(get_db)).
Les migrations Alembic utilisent DATABASE_URL_SYNC.
"""
