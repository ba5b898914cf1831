"""Startup data for the in-memory stores."""

from datetime import date

from articles_api.application.interfaces import PasswordHasher
from articles_api.domain.entities import Article, User

SEED_ARTICLES: tuple[Article, ...] = (
    Article(
        id=1,
        title="Les bases de Node.js",
        description="Introduction à Node.js et ses fonctionnalités principales.",
        publication_date=date(2023, 1, 1),
    ),
    Article(
        id=2,
        title="REST API avec Express",
        description="Comment créer une API RESTful avec Express.js.",
        publication_date=date(2023, 2, 15),
    ),
    Article(
        id=3,
        title="MongoDB pour les débutants",
        description="Guide sur l'utilisation de MongoDB pour des projets simples.",
        publication_date=date(2023, 3, 10),
    ),
    Article(
        id=4,
        title="Déploiement avec Docker",
        description="Utilisation de Docker pour containeriser les applications.",
        publication_date=date(2023, 4, 5),
    ),
    Article(
        id=5,
        title="Comprendre les Promises en JavaScript",
        description="Introduction aux Promises et à leur utilisation.",
        publication_date=date(2023, 5, 12),
    ),
    Article(
        id=6,
        title="Utilisation des WebSockets",
        description="Mettre en place des WebSockets pour des applications temps réel.",
        publication_date=date(2023, 6, 18),
    ),
    Article(
        id=7,
        title="Introduction à GraphQL",
        description="Découverte de GraphQL pour remplacer REST dans certaines situations.",
        publication_date=date(2023, 7, 25),
    ),
    Article(
        id=8,
        title="Sécurité dans les API REST",
        description="Principes de sécurité pour protéger vos API REST.",
        publication_date=date(2023, 8, 30),
    ),
    Article(
        id=9,
        title="Tests unitaires avec Jest",
        description="Introduction aux tests unitaires en JavaScript avec Jest.",
        publication_date=date(2023, 9, 22),
    ),
)

DEMO_USER_ID = 1
DEMO_USER_EMAIL = "admin@example.com"
DEMO_USER_NAME = "Administrator"


def build_seed_users(hasher: PasswordHasher, demo_password: str) -> list[User]:
    """Hash the demo credentials once, at startup."""
    return [
        User(
            id=DEMO_USER_ID,
            email=DEMO_USER_EMAIL,
            password_hash=hasher.hash(demo_password),
            name=DEMO_USER_NAME,
        ),
    ]
