"""
scripts

Utilitaires CLI exécutables depuis backend/ (python -m scripts.<nom>).
"""
