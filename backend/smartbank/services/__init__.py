"""
smartbank.services

Package “services” : logique applicative indépendante des endpoints HTTP.

- feature_extractor : entrée client -> vecteur (age, income, loans)
- score_client      : appel du service de scoring externe + fallback
- offer_engine      : score -> offre + message localisé
- client_store      : persistance / listing des clients
- client_pipeline   : orchestration de l’onboarding

Principe :
- smartbank.api = transport HTTP (routes, validation, dépendances)
- smartbank.services = orchestration métier (réutilisable, testable sans HTTP ni DB)
"""
