"""
smartbank.core

Package “cœur” de l’application : tout ce qui est transversal (cross-cutting concerns),
indépendant du domaine métier (clients, scoring, offres).

- settings
  Configuration via variables d’environnement (DB, URL du service de scoring, timeout, langue par défaut).

- errors
  Format d’erreur API uniforme (code, message, status, request_id, timestamp),
  AppHTTPException, et taxonomie métier (ValidationError, ScoringUnavailable, StorageError).

- logging
  Logs JSON enrichis (request_id + extras structurés).

- request_id
  Identifiant de corrélation d’une requête (ContextVar), propagé via X-Request-Id.
"""
