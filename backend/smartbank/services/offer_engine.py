from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from smartbank.core.errors import ValidationError

"""
Offer Engine.

Rôle (fonctionnel) :
- Associe un score de remboursement (0..1) à une offre commerciale et un message personnalisé.
- Règles ordonnées, la première qui matche gagne (bornes exclusives : la valeur frontière
  tombe dans le palier inférieur) :
  - score > 0.8        -> PREMIUM   : remise sur les intérêts
  - 0.5 < score <= 0.8 -> EXTENSION : allongement de la durée de remboursement
  - score <= 0.5       -> REVIEW    : revue manuelle du compte

Notes :
- Seuils conservés à l’identique (0.8 / 0.5) : les modifier change la classification observable.
- La langue ne change que le texte (libellé + message), jamais le palier.
- Seule personnalisation : le nom du client.
"""

TIER_PREMIUM = "premium"
TIER_EXTENSION = "extension"
TIER_REVIEW = "review"

PREMIUM_THRESHOLD = 0.8
EXTENSION_THRESHOLD = 0.5

# (seuil exclusif, palier), évalués dans l’ordre
TIER_RULES: Tuple[Tuple[float, str], ...] = (
    (PREMIUM_THRESHOLD, TIER_PREMIUM),
    (EXTENSION_THRESHOLD, TIER_EXTENSION),
)

# locale -> palier -> (libellé de l’offre, modèle de message)
TEMPLATES: Dict[str, Dict[str, Tuple[str, str]]] = {
    "ar": {
        TIER_PREMIUM: (
            "خصم 15% على الفوائد",
            "تهانينا {name}! بناءً على تقييمك الممتاز، يسعدنا أن نقدم لك خصمًا خاصًا.",
        ),
        TIER_EXTENSION: (
            "تمديد فترة السداد",
            "مرحباً {name}, أنت مؤهل لتمديد فترة سداد قرضك لتخفيف الأقساط الشهرية.",
        ),
        TIER_REVIEW: (
            "مراجعة الحساب مطلوبة",
            "السيد/ة {name}, نود تحديد موعد لمراجعة حسابك وبحث أفضل الحلول المالية لك.",
        ),
    },
    "en": {
        TIER_PREMIUM: (
            "15% interest discount",
            "Congratulations {name}! Based on your excellent rating, we are pleased to offer you a special discount.",
        ),
        TIER_EXTENSION: (
            "Repayment period extension",
            "Hello {name}, you qualify for an extended repayment period to ease your monthly installments.",
        ),
        TIER_REVIEW: (
            "Account review required",
            "Dear {name}, we would like to schedule a review of your account to find the best financial solutions for you.",
        ),
    },
}

SUPPORTED_LOCALES: Tuple[str, ...] = tuple(TEMPLATES)
DEFAULT_LOCALE = "ar"


@dataclass(frozen=True)
class Offer:
    """Offre dérivée d’un score (immuable)."""
    tier: str      # premium / extension / review
    label: str     # libellé localisé
    message: str   # message localisé, personnalisé avec le nom


def tier_for(score: float) -> str:
    """Palier d’un score (fonction totale sur [0, 1], monotone)."""
    for threshold, tier in TIER_RULES:
        if score > threshold:
            return tier
    return TIER_REVIEW


def derive_offer(score: float, name: str, locale: str = DEFAULT_LOCALE) -> Offer:
    templates = TEMPLATES.get(locale)
    if templates is None:
        raise ValidationError(
            f"Langue non supportée: {locale}",
            details={"locale": locale, "supported": list(SUPPORTED_LOCALES)},
        )

    tier = tier_for(score)
    label, message = templates[tier]
    return Offer(tier=tier, label=label, message=message.format(name=name))


class OfferEngine:
    """derive_offer avec une langue par défaut liée (settings.DEFAULT_LOCALE côté API)."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        if locale not in TEMPLATES:
            raise ValidationError(f"Langue non supportée: {locale}", details={"locale": locale})
        self.locale = locale

    def derive(self, score: float, name: str, locale: Optional[str] = None) -> Offer:
        return derive_offer(score, name, locale or self.locale)
