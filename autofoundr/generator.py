import random
from typing import List, Optional

from autofoundr.config import DEFAULT_LOGO_BASE_URL
from autofoundr.schemas import Brand, Product, GenerateResponse

BRAND_SUFFIXES = ["Co", "Lab", "Works", "Craft", "Studio", "Goods", "Peak", "Root"]
PRICE_POINTS = [19.99, 24.99, 29.99, 49.99]
MAX_BRAND_LENGTH = 30
TITLE_SUFFIX = " — Premium Edition"


class ContentGenerator:
    """Mock brand/product/ad generator.

    Stands in for real model calls: every field is a template around the
    phrase, with the brand suffix and price drawn from `rng`. Pass a seeded
    `random.Random` to pin the output.
    """

    def __init__(self, rng: Optional[random.Random] = None, logo_base_url: str = DEFAULT_LOGO_BASE_URL):
        self.rng = rng or random.Random()
        self.logo_base_url = logo_base_url

    def brand_name(self, phrase: str) -> str:
        tokens = phrase.split()
        first = tokens[0].capitalize() if tokens else ""
        return (first + self.rng.choice(BRAND_SUFFIXES))[:MAX_BRAND_LENGTH]

    def logo_url(self, phrase: str) -> str:
        # Placeholder: no image is produced
        text = phrase.replace(" ", "+")
        return f"{self.logo_base_url}?text={text}"

    def title(self, phrase: str) -> str:
        return f"{phrase.capitalize()}{TITLE_SUFFIX}"

    def description(self, phrase: str) -> str:
        return f"The {phrase} designed for people who want quality and sustainability. Handcrafted and tested."

    def price(self) -> str:
        p = self.rng.choice(PRICE_POINTS)
        return f"${p:.2f}"

    def ads(self, phrase: str) -> List[str]:
        return [
            f"Try our {phrase} — limited launch offer!",
            f"Why our {phrase} is better: sustainable, durable, stylish.",
            f"See how our {phrase} fits your life in 15 seconds.",
        ]

    def generate(self, phrase: str) -> GenerateResponse:
        brand = Brand(name=self.brand_name(phrase), logo=self.logo_url(phrase))
        product = Product(
            title=self.title(phrase),
            description=self.description(phrase),
            price=self.price(),
        )
        return GenerateResponse(brand=brand, product=product, ads=self.ads(phrase))


# Module-level helpers sharing one generator
_default = ContentGenerator()


def mock_brand_name(base: str) -> str:
    return _default.brand_name(base)


def mock_logo_url(base: str) -> str:
    return _default.logo_url(base)


def mock_title(base: str) -> str:
    return _default.title(base)


def mock_description(base: str) -> str:
    return _default.description(base)


def mock_price() -> str:
    return _default.price()


def mock_ads(base: str) -> List[str]:
    return _default.ads(base)
