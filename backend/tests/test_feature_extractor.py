"""
Tests de l’extraction de features : ordre du vecteur et conversion numérique.
"""

import pytest

from smartbank.core.errors import InvalidInput, ValidationError
from smartbank.schemas.clients import ClientCreate
from smartbank.services.feature_extractor import FEATURE_ORDER, extract


class TestExtract:

    def test_vector_order_matches_scoring_contract(self):
        client = ClientCreate(name="Sara", age=30, income=50, loans=1)
        assert extract(client) == (30, 50, 1)
        assert FEATURE_ORDER == ("age", "income", "loans")

    def test_numeric_strings_are_coerced(self):
        client = ClientCreate.model_construct(name="Omar", age="42", income="120", loans="0")
        assert extract(client) == (42, 120, 0)

    def test_zero_income_and_loans_are_valid(self):
        client = ClientCreate(name="Lina", age=19, income=0, loans=0)
        assert extract(client) == (19, 0, 0)

    @pytest.mark.parametrize(
        "field,value",
        [("age", "abc"), ("income", None), ("loans", "1.5"), ("age", True)],
    )
    def test_non_coercible_field_raises_invalid_input(self, field, value):
        data = {"name": "Sara", "age": 30, "income": 50, "loans": 1, field: value}
        client = ClientCreate.model_construct(**data)

        with pytest.raises(InvalidInput) as exc_info:
            extract(client)

        assert exc_info.value.field == field
        assert isinstance(exc_info.value, ValidationError)
