"""Base generator class for synthetic registry data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Seeds both the Faker instance and
        the module-level ``random`` generator.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
