"""
Channel-neutral replies and their texts.
"""

from dataclasses import dataclass, field

from salesbot.core.catalog import Product


ASK_TOPIC_MESSAGE = "Dime qué te interesa mejorar (ej: cuidado facial, energía, hogar)"

NO_MATCHES_MESSAGE = (
    "No encontré coincidencias. ¿Quieres dejar tu email para que te envíe opciones?"
)

EMPTY_CATALOG_MESSAGE = "Por ahora no hay productos en el catálogo."

FOUND_MESSAGE = "Esto es lo que te recomiendo:"


def greeting_message(assistant_name: str) -> str:
    return (
        f"¡Hola! Soy {assistant_name}. ¿Quieres ver productos o una recomendación?\n"
        "Responde: 1) Ver catálogo  2) Recomiéndame"
    )


def categories_message(categories: list[str]) -> str:
    if not categories:
        return EMPTY_CATALOG_MESSAGE
    lines = ["Categorías:"]
    lines.extend(f"{i}) {c}" for i, c in enumerate(categories, 1))
    return "\n".join(lines)


@dataclass(frozen=True)
class ProductCard:
    """Product summary rendered by channels."""
    name: str
    short_description: str
    price: str
    currency: str
    buy_link: str
    image_url: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductCard":
        return cls(
            name=product.name,
            short_description=product.short_description,
            price=f"{product.price:f}",
            currency=product.currency,
            buy_link=product.buy_link,
            image_url=product.image_url,
        )

    def caption(self) -> str:
        """Multi-line caption for channels that show images."""
        return (
            f"{self.name}\n{self.short_description}\n"
            f"Precio: {self.price} {self.currency}\n"
            f"Comprar: {self.buy_link}"
        )

    def summary(self) -> str:
        """One-line text for SMS-like channels."""
        return f"{self.name} - {self.short_description} - {self.buy_link}"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "shortDescription": self.short_description,
            "price": self.price,
            "currency": self.currency,
            "buyLink": self.buy_link,
            "imageUrl": self.image_url or None,
        }


@dataclass(frozen=True)
class Reply:
    """Normalized reply: text plus optional product cards."""
    text: str
    products: list[ProductCard] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "products": [p.to_dict() for p in self.products],
        }

    def as_plain_text(self) -> str:
        """Full reply for text-only channels."""
        if not self.products:
            return self.text
        return "\n\n".join(p.summary() for p in self.products)
