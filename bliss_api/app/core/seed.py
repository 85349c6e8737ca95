"""
Demo data for local development.

``seed_demo_data`` fills an empty store with eight profiles, three
mutual matches with a few messages each, one unanswered like and an
active monthly VIP subscription for ``miguel``.  All accounts share
``settings.demo_password`` except ``joao`` (a non‑VIP test account with
its own password).  Seeding a store that already holds accounts does
nothing.
"""

import logging

from ..schemas.message import MessageCreate
from ..schemas.subscription import SubscriptionCreate
from ..services.match_service import MatchService
from ..services.message_service import MessageService
from ..services.subscription_service import SubscriptionService
from ..services.user_service import UserService
from .config import settings
from .security import hash_password
from .store import DataStore

logger = logging.getLogger(__name__)

PHOTO_BASE = "https://images.unsplash.com/"

DEMO_USERS = [
    {
        "username": "miguel",
        "name": "Miguel",
        "age": 30,
        "bio": "Fotógrafo e amante da natureza. Adoro viajar, conhecer novos lugares e experimentar diferentes culinárias.",
        "location": "São Paulo",
        "gender": "male",
        "looking_for": "female",
        "photos": ["photo-1535713875002-d1d0cf377fde", "photo-1513267048331-5611cad62e41", "photo-1517841905240-472988babdf9"],
        "interests": ["Fotografia", "Viagens", "Gastronomia", "Cinema", "Música"],
    },
    {
        "username": "sofia",
        "name": "Sofia",
        "age": 28,
        "bio": "Apaixonada por arte e cultura. Estou sempre em busca de novas experiências e conexões significativas.",
        "location": "São Paulo",
        "gender": "female",
        "looking_for": "male",
        "photos": ["photo-1494790108377-be9c29b29330", "photo-1534528741775-53994a69daeb"],
        "interests": ["Fotografia", "Viagens", "Yoga"],
    },
    {
        "username": "lucas",
        "name": "Lucas",
        "age": 32,
        "bio": "Engenheiro e entusiasta de esportes. Amo assistir jogos de futebol e praticar corrida aos finais de semana.",
        "location": "Rio de Janeiro",
        "gender": "male",
        "looking_for": "female",
        "photos": ["photo-1539571696357-5a69c17a67c6", "photo-1507003211169-0a1dd7228f2d"],
        "interests": ["Esportes", "Tecnologia", "Viagens"],
    },
    {
        "username": "mariana",
        "name": "Mariana",
        "age": 26,
        "bio": "Designer gráfica e amante de livros. Buscando alguém que compartilhe do mesmo amor pela leitura.",
        "location": "São Paulo",
        "gender": "female",
        "looking_for": "male",
        "photos": ["photo-1614283233556-f35b0c801ef1", "photo-1524504388940-b1c1722653e1"],
        "interests": ["Leitura", "Arte", "Design", "Música"],
    },
    {
        "username": "julia",
        "name": "Julia",
        "age": 25,
        "bio": "Professora de yoga e meditação. Estou sempre em busca de paz interior e harmonia.",
        "location": "São Paulo",
        "gender": "female",
        "looking_for": "male",
        "photos": ["photo-1534528741775-53994a69daeb", "photo-1524504388940-b1c1722653e1"],
        "interests": ["Yoga", "Meditação", "Leitura", "Viagens"],
    },
    {
        "username": "pedro",
        "name": "Pedro",
        "age": 30,
        "bio": "Chef de cozinha e viajante. Adoro conhecer novos sabores e culturas através da gastronomia.",
        "location": "São Paulo",
        "gender": "male",
        "looking_for": "female",
        "photos": ["photo-1507003211169-0a1dd7228f2d", "photo-1504257432389-52343af06ae3"],
        "interests": ["Gastronomia", "Viagens", "Culinária", "Vinhos"],
    },
    {
        "username": "amanda",
        "name": "Amanda",
        "age": 27,
        "bio": "Apaixonada por música e festivais. Sempre em busca da próxima aventura.",
        "location": "Rio de Janeiro",
        "gender": "female",
        "looking_for": "male",
        "photos": ["photo-1524504388940-b1c1722653e1", "photo-1614283233556-f35b0c801ef1"],
        "interests": ["Música", "Festivais", "Viagens", "Arte"],
    },
    {
        "username": "joao",
        "name": "João",
        "age": 29,
        "bio": "Arquiteto e entusiasta de fotografia. Busco alguém para compartilhar momentos e eternizá-los em fotos.",
        "location": "São Paulo",
        "gender": "male",
        "looking_for": "female",
        "photos": ["photo-1504257432389-52343af06ae3", "photo-1507003211169-0a1dd7228f2d"],
        "interests": ["Arquitetura", "Fotografia", "Design", "Viagens"],
        "password": "testesemvip",
    },
]

# (first, second, [(sender, content, read), ...])
DEMO_MATCHES = [
    (
        "miguel",
        "julia",
        [
            ("julia", "Oi! Tudo bem com você? 😊", True),
            ("miguel", "Oi Julia! Tudo ótimo, e você? Que legal termos dado match!", True),
            ("julia", "Também estou bem! Sim, vi que você curte fotografia também. Qual seu estilo favorito?", True),
        ],
    ),
    (
        "miguel",
        "pedro",
        [("pedro", "Vamos combinar de ir naquele restaurante novo então? O que acha?", False)],
    ),
    (
        "miguel",
        "amanda",
        [("miguel", "Com certeza! Vou te mandar o link", True)],
    ),
]


def seed_demo_data(store: DataStore) -> None:
    if store.count("users"):
        logger.info("Store already holds users; skipping demo data")
        return

    users = UserService(store)
    matches = MatchService(store)
    messages = MessageService(store)
    subscriptions = SubscriptionService(store)

    shared_hash = hash_password(settings.demo_password)
    ids = {}
    for profile in DEMO_USERS:
        data = dict(profile)
        password = data.pop("password", None)
        photos = [PHOTO_BASE + photo for photo in data["photos"]]
        data.update(
            password=hash_password(password) if password else shared_hash,
            photos=photos,
            profile_pic_url=photos[0],
        )
        ids[data["username"]] = users.create_user(data).id

    for first, second, conversation in DEMO_MATCHES:
        matches.record_swipe(ids[first], ids[second], True)
        matches.record_swipe(ids[second], ids[first], True)
        for sender, content, read in conversation:
            receiver = second if sender == first else first
            messages.create_message(
                MessageCreate(sender_id=ids[sender], receiver_id=ids[receiver], content=content, read=read)
            )

    # Sofia liked Miguel; he has not answered yet.
    matches.record_swipe(ids["sofia"], ids["miguel"], True)

    subscriptions.create(
        SubscriptionCreate(
            user_id=ids["miguel"],
            plan_type="monthly",
            amount=settings.monthly_price,
            payment_method="credit_card",
        )
    )
    logger.info("Seeded %d demo users", len(ids))
