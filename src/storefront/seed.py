"""Sample catalogue and style quiz for a fresh store.

Seeding is idempotent at the store level: if any product exists, nothing is
written.
"""

import json

import structlog
from protean.utils.globals import current_domain

from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.product import Product
from storefront.quiz.creation import CreateQuiz

logger = structlog.get_logger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?fit=max&fm=jpg&q=80&w=1080"

TREX = _IMG.format("1579298245158-33e8f568f7d3")
RAPTOR = _IMG.format("1600185365483-26d7a4cc7519")
STEGO = _IMG.format("1584735175315-9d5df23860e6")
BRONTO = _IMG.format("1560769629-975ec94e6a86")
PTERO = _IMG.format("1552346154-21d32810aba3")
PARASAUR = _IMG.format("1525966222134-fcfa99b8ae77")
LIFESTYLE_1 = _IMG.format("1465479423260-c4afc24172c6")
LIFESTYLE_2 = _IMG.format("1543508282-6319a3e2621f")

PRODUCTS = [
    {
        "name": "T-Rex Trappers",
        "description": "Dominate the urban jungle with these fierce T-Rex inspired kicks.",
        "price": 129.99,
        "image_url": TREX,
        "image_urls": [TREX, RAPTOR, STEGO, BRONTO],
        "category": "Running",
        "collection": "T-Rex Line",
        "colors": ["#39FF14", "#FF5714", "#008080"],
        "sizes": ["7", "8", "9", "10", "11", "12", "13", "14"],
        "is_featured": True,
        "badge": "HOT!",
        "dino_facts": (
            "These fierce kicks are inspired by the king of dinosaurs, the mighty Tyrannosaurus Rex! "
            "Grip pattern inspired by authentic T-Rex footprints. "
            "Scale-textured side panels for durability and style. "
            'Custom "bite mark" sole design provides superior traction.'
        ),
        "stock": 25,
    },
    {
        "name": "Volcano Velociraptors",
        "description": "Speed and agility inspired by the fastest dinosaurs ever known.",
        "price": 149.99,
        "image_url": RAPTOR,
        "image_urls": [RAPTOR, TREX, STEGO, PTERO],
        "category": "Running",
        "collection": "Raptor Series",
        "colors": ["#FF5714", "#2E8B57", "#D2B48C"],
        "sizes": ["7", "8", "9", "10", "11", "12"],
        "is_featured": True,
        "badge": "NEW",
        "dino_facts": (
            "Inspired by the lightning-fast Velociraptor, these shoes feature a special claw-shaped traction "
            "pattern for optimal grip. The streamlined design mimics a raptor's aerodynamic body for maximum "
            "speed. Side panels feature a scale pattern based on actual velociraptor fossil discoveries."
        ),
        "stock": 18,
    },
    {
        "name": "Stegosaurus Steppers",
        "description": "Armored comfort with spikes inspired by Stegosaurus plates.",
        "price": 119.99,
        "image_url": STEGO,
        "image_urls": [STEGO, TREX, RAPTOR, LIFESTYLE_1],
        "category": "Casual",
        "collection": "Herbivore Collection",
        "colors": ["#008080", "#39FF14", "#D2B48C"],
        "sizes": ["6", "7", "8", "9", "10", "11", "12"],
        "is_featured": True,
        "badge": "",
        "dino_facts": (
            "The unique design of these shoes is inspired by the armored plates of the Stegosaurus. "
            "The heel guard is modeled after the thagomizer (tail spikes) that protected this dinosaur from "
            "predators. Extra cushioning in the sole mimics the sturdy build of this herbivore."
        ),
        "stock": 22,
    },
    {
        "name": "Brontoboots",
        "description": "Heavy-duty comfort inspired by the gentle giants of the dinosaur world.",
        "price": 139.99,
        "image_url": BRONTO,
        "image_urls": [BRONTO, TREX, STEGO, PARASAUR],
        "category": "Walking",
        "collection": "Herbivore Collection",
        "colors": ["#D2B48C", "#008080", "#2E8B57"],
        "sizes": ["7", "8", "9", "10", "11", "12"],
        "is_featured": False,
        "badge": "",
        "dino_facts": (
            "Inspired by the mighty Brontosaurus, these boots feature extra cushioning to support your weight, "
            "just like the Brontosaurus' sturdy legs supported its massive body. The footprint tread pattern is "
            "based on actual fossilized Brontosaurus tracks."
        ),
        "stock": 15,
    },
    {
        "name": "Pterodactyl Flight",
        "description": "Lightweight runners that make you feel like you're flying.",
        "price": 159.99,
        "image_url": PTERO,
        "image_urls": [PTERO, TREX, STEGO, LIFESTYLE_2],
        "category": "Running",
        "collection": "Sky Series",
        "colors": ["#39FF14", "#ADD8E6", "#FF5714"],
        "sizes": ["6", "7", "8", "9", "10", "11"],
        "is_featured": False,
        "badge": "LIGHT",
        "dino_facts": (
            "Inspired by the flying Pterodactyl, these ultralight shoes feature an aerodynamic design. "
            "The uppers are made with a special mesh pattern that mimics the wing membrane of pterosaurs. "
            "The wing-like tongue helps create a snug, comfortable fit."
        ),
        "stock": 12,
    },
    {
        "name": "Parasaurolophus Pumps",
        "description": "Make a statement with these bold, crest-inspired athletic shoes.",
        "price": 134.99,
        "image_url": PARASAUR,
        "image_urls": [PARASAUR, RAPTOR, STEGO, LIFESTYLE_1],
        "category": "Basketball",
        "collection": "Herbivore Collection",
        "colors": ["#FF5714", "#008080", "#39FF14"],
        "sizes": ["7", "8", "9", "10", "11", "12", "13"],
        "is_featured": False,
        "badge": "",
        "dino_facts": (
            "These shoes feature a distinctive high-top design inspired by the Parasaurolophus's famous cranial "
            "crest. The crest served as a resonating chamber, and these shoes are designed with acoustic-inspired "
            "cushioning. Side panels feature patterns inspired by Parasaurolophus fossil skin impressions."
        ),
        "stock": 16,
    },
]

QUIZ_NAME = "Which Dino Kick Are You?"
QUIZ_DESCRIPTION = "Find your perfect prehistoric pair!"

# (question, [(option text, index into PRODUCTS)])
QUIZ_QUESTIONS = [
    (
        "What's your favorite dinosaur?",
        [
            ("T-Rex - fierce and powerful", 0),
            ("Velociraptor - fast and agile", 1),
            ("Stegosaurus - unique and sturdy", 2),
            ("Pterodactyl - high-flying and free", 4),
        ],
    ),
    (
        "How would you describe your style?",
        [
            ("Bold and bright - I want to stand out!", 0),
            ("Sleek and sporty - performance matters", 1),
            ("Earthy and natural - comfort is key", 3),
            ("Unique and eye-catching - I set trends", 5),
        ],
    ),
    (
        "When do you typically wear sneakers?",
        [
            ("Working out or running", 4),
            ("Casual everyday wear", 2),
            ("Playing sports with friends", 1),
            ("Making a fashion statement", 0),
        ],
    ),
]


def seed_storefront() -> bool:
    """Insert the sample catalogue and quiz. Returns False when the store already has products."""
    existing = current_domain.repository_for(Product).all_products()
    if existing:
        logger.info("seed_skipped", product_count=len(existing))
        return False

    product_ids = []
    for data in PRODUCTS:
        command = CreateProduct(
            **{
                **data,
                "image_urls": json.dumps(data["image_urls"]),
                "colors": json.dumps(data["colors"]),
                "sizes": json.dumps(data["sizes"]),
            }
        )
        product_ids.append(current_domain.process(command, asynchronous=False))

    questions = [
        {
            "question": question,
            "options": [{"text": text, "product_id": product_ids[index]} for text, index in options],
        }
        for question, options in QUIZ_QUESTIONS
    ]
    current_domain.process(
        CreateQuiz(name=QUIZ_NAME, description=QUIZ_DESCRIPTION, questions=json.dumps(questions)),
        asynchronous=False,
    )

    logger.info("seed_complete", product_count=len(product_ids), quiz=QUIZ_NAME)
    return True
