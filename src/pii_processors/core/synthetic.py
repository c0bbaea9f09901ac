"""
Synthetic value supplier

Faker-backed suppliers for each synthesized field type. Each supplier is a
zero-argument callable suitable for the similarity gate.
"""

from typing import Callable, Optional

from faker import Faker

from pii_processors.logging import get_logger


logger = get_logger(__name__)


class SyntheticValueSupplier:
    """Produces random look-alike values for named field types.

    Wraps one Faker instance; seeding it makes every supplier reproducible.

    Example:
        >>> supplier = SyntheticValueSupplier(seed=42)
        >>> city = supplier.get("city")()
    """

    # Field type -> Faker provider method
    _PROVIDER_MAP: dict[str, str] = {
        "street_address": "street_address",
        "city": "city",
        "email": "email",
        "first_name": "first_name",
        "full_name": "name",
        "last_name": "last_name",
        "phone": "phone_number",
        "state": "state",
        "username": "user_name",
        "zip": "zipcode",
    }

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US"):
        """Initialize the supplier.

        Args:
            seed: Optional seed for deterministic output.
            locale: Faker locale for region-specific data.
        """
        self.locale = locale
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)
            logger.debug("Seeded synthetic supplier", extra={"locale": locale})

    def get(self, field_type: str) -> Callable[[], str]:
        """Return the supplier for a field type.

        Raises:
            ValueError: If field_type is not recognized.
        """
        method = self._PROVIDER_MAP.get(field_type)
        if method is None:
            raise ValueError(
                f"Unknown field type: '{field_type}'. "
                f"Supported types: {self.supported_types}"
            )
        provider = getattr(self._faker, method)
        return lambda: str(provider())

    @property
    def supported_types(self) -> list[str]:
        """Return the list of supported field types."""
        return list(self._PROVIDER_MAP.keys())
