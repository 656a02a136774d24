# Static sample catalogue loaded into a fresh MemStorage.
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import MemStorage

UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=1170&q=80"

COUNTRIES = [
    ("United States", "US", ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Francisco"]),
    ("Spain", "ES", ["Madrid", "Barcelona", "Valencia", "Seville", "Málaga", "Bilbao", "Granada", "Palma de Mallorca", "Tenerife", "Córdoba"]),
    ("France", "FR", ["Paris", "Marseille", "Lyon", "Toulouse", "Nice", "Nantes", "Strasbourg", "Montpellier", "Bordeaux", "Lille"]),
    ("Italy", "IT", ["Rome", "Milan", "Naples", "Turin", "Palermo", "Genoa", "Bologna", "Florence", "Bari", "Venice"]),
    ("Japan", "JP", ["Tokyo", "Osaka", "Kyoto", "Yokohama", "Sapporo", "Nagoya", "Fukuoka", "Kobe", "Hiroshima", "Sendai"]),
    ("United Kingdom", "GB", ["London", "Manchester", "Birmingham", "Edinburgh", "Glasgow", "Liverpool", "Bristol", "Leeds", "Newcastle", "Sheffield"]),
    ("Germany", "DE", ["Berlin", "Hamburg", "Munich", "Cologne", "Frankfurt", "Stuttgart", "Düsseldorf", "Leipzig", "Dortmund", "Essen"]),
    ("Australia", "AU", ["Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide", "Gold Coast", "Canberra", "Newcastle", "Wollongong", "Hobart"]),
    ("Greece", "GR", ["Athens", "Thessaloniki", "Patras", "Heraklion", "Larissa", "Volos", "Rhodes", "Chania", "Santorini", "Corfu"]),
    ("Thailand", "TH", ["Bangkok", "Chiang Mai", "Phuket", "Pattaya", "Hua Hin", "Koh Samui", "Krabi", "Ayutthaya", "Phi Phi Islands", "Kanchanaburi"]),
]

DESTINATIONS = [
    {
        "name": "Barcelona", "country": "Spain",
        "description": "A vibrant city known for its architecture, culture, and beautiful beaches.",
        "image_url": UNSPLASH.format("1523531294919-4bcd7c65e216"),
        "rating": 4.5, "review_count": 236, "price_per_person": 1200, "duration_days": 7,
        "tags": ["Beach", "Culture", "Food"], "budget_match": 98,
    },
    {
        "name": "Tokyo", "country": "Japan",
        "description": "A fascinating blend of traditional and ultra-modern, with something for everyone.",
        "image_url": UNSPLASH.format("1542051841857-5f90071e7989"),
        "rating": 4.9, "review_count": 412, "price_per_person": 1850, "duration_days": 10,
        "tags": ["City", "Culture", "Food"], "budget_match": 82,
    },
    {
        "name": "Santorini", "country": "Greece",
        "description": "Famous for its stunning sunsets, white-washed buildings and blue domes.",
        "image_url": UNSPLASH.format("1506973035872-a4ec16b8e8d9"),
        "rating": 4.0, "review_count": 188, "price_per_person": 1450, "duration_days": 6,
        "tags": ["Beach", "Relaxation", "Romantic"], "budget_match": 95,
    },
]

BARCELONA_HOTELS = [
    {
        "name": "Hotel Arts Barcelona",
        "description": "5-star luxury hotel with stunning sea views, rooftop pool, and award-winning dining.",
        "image_url": UNSPLASH.format("1455587734955-081b22074882"),
        "location": "Beachfront", "distance_from_center": 2.1, "rating": 4.5, "review_count": 842,
        "price_per_night": 210, "facilities": ["Free WiFi", "Pool", "Restaurant", "Room Service"],
        "label": "Recommended", "discount_info": "15% off for your dates", "within_budget": True,
    },
    {
        "name": "Praktik Rambla",
        "description": "Boutique hotel in a modernist building with charming terrace, central location near Passeig de Gràcia.",
        "image_url": UNSPLASH.format("1445019980597-93fa8acb246c"),
        "location": "Eixample", "distance_from_center": 0.5, "rating": 4.0, "review_count": 526,
        "price_per_night": 150, "facilities": ["Free WiFi", "Breakfast", "Historic Building"],
        "label": "Best Value", "discount_info": "Free cancellation", "within_budget": True,
    },
    {
        "name": "Casa Camper Barcelona",
        "description": "Designer boutique hotel with 24-hour complimentary snacks and drinks, spacious rooms with sitting areas.",
        "image_url": UNSPLASH.format("1566073771259-6a8506099945"),
        "location": "El Raval", "distance_from_center": 0.8, "rating": 4.8, "review_count": 368,
        "price_per_night": 280, "facilities": ["Free WiFi", "24h Food", "Fitness", "Laundry"],
        "label": "Premium", "discount_info": "Only 2 rooms left", "within_budget": False,
    },
    {
        "name": "Generator Barcelona",
        "description": "Modern hostel with private rooms and social atmosphere, rooftop terrace and trendy bar area.",
        "image_url": UNSPLASH.format("1578683010236-d716f9a3f461"),
        "location": "Gràcia", "distance_from_center": 1.5, "rating": 3.0, "review_count": 523,
        "price_per_night": 85, "facilities": ["Free WiFi", "Bar", "Social"],
        "label": "Budget Friendly", "discount_info": "Save $15 with code SUMMER", "within_budget": True,
    },
]

BARCELONA_ATTRACTIONS = [
    {
        "name": "Sagrada Familia",
        "description": "Gaudí's unfinished masterpiece, this spectacular basilica is a must-see Barcelona attraction.",
        "image_url": UNSPLASH.format("1583779457094-ab6f9164a1c8"),
        "location": "L'Eixample", "type": "Sightseeing", "rating": 4.8, "review_count": 14257,
        "price": 26, "within_budget": True, "label": "Within Budget",
    },
    {
        "name": "Park Güell",
        "description": "Colorful park with amazing views, featuring Gaudí's iconic mosaic work and natural design.",
        "image_url": UNSPLASH.format("1551634979-2b11f8c218da"),
        "location": "Gràcia", "type": "Sightseeing", "rating": 4.3, "review_count": 9873,
        "price": 12, "within_budget": True, "label": "Within Budget",
    },
    {
        "name": "Gothic Quarter Tour",
        "description": "Walking tour through Barcelona's historic Gothic Quarter with a knowledgeable local guide.",
        "image_url": UNSPLASH.format("1539037116277-4db20889f2d4"),
        "location": "Ciutat Vella", "type": "Tour", "rating": 4.9, "review_count": 3421,
        "price": 18, "within_budget": True, "label": "Best Value",
    },
    {
        "name": "Tapas Cooking Class",
        "description": "Learn to cook authentic Spanish tapas with a professional chef, then enjoy your creations.",
        "image_url": UNSPLASH.format("1591780980986-58d9b721a7e3"),
        "location": "El Born", "type": "Food & Drink", "rating": 4.7, "review_count": 1238,
        "price": 65, "within_budget": False, "label": "Popular",
    },
    {
        "name": "Casa Batlló",
        "description": "One of Gaudí's most famous buildings with a dragon-inspired façade and innovative design.",
        "image_url": UNSPLASH.format("1512917774080-9991f1c4c750"),
        "location": "Passeig de Gràcia", "type": "Sightseeing", "rating": 4.6, "review_count": 7842,
        "price": 35, "within_budget": True, "label": "Within Budget",
    },
]

SAMPLE_DAYS = [
    ("Arrival & Exploration", [
        ("10:45 AM", "Arrival at Barcelona El Prat Airport"),
        ("12:30 PM", "Hotel check-in & refreshment"),
        ("2:00 PM", "Explore Las Ramblas & Gothic Quarter"),
        ("7:00 PM", "Welcome dinner at El Nacional"),
    ]),
    ("Gaudí Masterpieces", [
        ("9:00 AM", "Sagrada Familia guided tour"),
        ("1:00 PM", "Lunch at Enrique Tomás"),
        ("3:00 PM", "Park Güell visit"),
    ]),
    ("Beach & Culture", [
        ("10:00 AM", "Relaxation at Barceloneta Beach"),
        ("2:00 PM", "Visit Picasso Museum"),
        ("7:00 PM", "Tapas Cooking Class & Dinner"),
    ]),
]

TOUR_GUIDES = [
    {
        "name": "Elena Gomez", "location": "Barcelona, Spain",
        "bio": "Professional guide with over 10 years of experience showing tourists the hidden gems of Barcelona. "
               "Fluent in Spanish, English, and French, specializing in architectural and culinary tours.",
        "image_url": UNSPLASH.format("1573496359142-b8d87734a5a2"),
        "rating": 4.9, "review_count": 143,
        "specialties": ["Architecture", "Culinary", "Local Culture"],
        "languages": ["Spanish", "English", "French"],
        "price_per_day": 180, "years_experience": 10, "tours_completed": 756,
        "certifications": ["Licensed Barcelona Tour Guide", "Culinary Tour Specialist", "First Aid Certified"],
        "contact_email": "elena.gomez@barcelonaguides.com", "contact_phone": "+34 612 345 678",
    },
    {
        "name": "Akira Tanaka", "location": "Tokyo, Japan",
        "bio": "Tokyo native with extensive knowledge of both traditional and modern aspects of Japanese culture. "
               "Passionate about sharing authentic experiences with travelers seeking to discover the real Japan.",
        "image_url": UNSPLASH.format("1472099645785-5658abf4ff4e"),
        "rating": 4.8, "review_count": 98,
        "specialties": ["Traditional Culture", "Technology", "Food Tours"],
        "languages": ["Japanese", "English", "Mandarin"],
        "price_per_day": 200, "years_experience": 8, "tours_completed": 512,
        "certifications": ["Tokyo Tourism Association Guide", "Japanese Cultural Heritage Expert", "Language Proficiency"],
        "contact_email": "akira.tanaka@tokyoguides.jp", "contact_phone": "+81 90 1234 5678",
    },
    {
        "name": "Dimitris Papadopoulos", "location": "Santorini, Greece",
        "bio": "Island native with deep knowledge of Greek history and culture. Specializes in private tours that combine "
               "breathtaking scenery, historical sites, and authentic local experiences off the beaten path.",
        "image_url": UNSPLASH.format("1507003211169-0a1dd7228f2d"),
        "rating": 4.7, "review_count": 76,
        "specialties": ["History", "Photography", "Culinary", "Sailing"],
        "languages": ["Greek", "English", "Italian", "German"],
        "price_per_day": 160, "years_experience": 15, "tours_completed": 628,
        "certifications": ["Greek National Tourism Organization License", "Marine Safety Certified", "Advanced First Aid"],
        "contact_email": "dimitris@santoriniexplorers.gr", "contact_phone": "+30 695 123 4567",
    },
]

ELENA_REVIEWS = [
    {
        "reviewer_name": "Sarah Johnson",
        "reviewer_image": UNSPLASH.format("1494790108377-be9c29b29330"),
        "rating": 5.0,
        "comment": "Elena showed us a Barcelona we would never have discovered on our own. Her knowledge of Gaudí's "
                   "architecture was incredible, and she knew exactly when to visit each site to avoid the crowds.",
        "date": "2023-05-15", "tour_location": "Barcelona",
    },
    {
        "reviewer_name": "Michael Chen",
        "reviewer_image": UNSPLASH.format("1507003211169-0a1dd7228f2d"),
        "rating": 4.5,
        "comment": "Elena is extremely knowledgeable and friendly. She customized our tour perfectly for our interests "
                   "and her restaurant recommendations were spot on!",
        "date": "2023-04-22", "tour_location": "Barcelona",
    },
]

ELENA_PHOTOS = [
    {"image_url": UNSPLASH.format("1551622996-91a4c97ad239"), "location": "Sagrada Familia, Barcelona", "date": "2023-03-10"},
    {"image_url": UNSPLASH.format("1561409106-fece0aca76fc"), "location": "Park Güell, Barcelona", "date": "2023-02-15"},
    {"image_url": UNSPLASH.format("1587789202069-f57ef526faf2"), "location": "Gothic Quarter, Barcelona", "date": "2023-04-18"},
]


def seed_sample_data(store: "MemStorage") -> None:
    for name, code, cities in COUNTRIES:
        store.add_country({"name": name, "code": code, "cities": cities})

    dests = [store.create_destination(d) for d in DESTINATIONS]
    barcelona = dests[0]

    for hotel in BARCELONA_HOTELS:
        store.create_hotel({**hotel, "destination_id": barcelona.id})
    for attraction in BARCELONA_ATTRACTIONS:
        store.create_attraction({**attraction, "destination_id": barcelona.id})

    trip = store.create_trip({
        "destination_id": barcelona.id,
        "start_date": "2023-06-15",
        "end_date": "2023-06-22",
        "duration": 7,
        "budget": 2000,
        "travelers": 2,
        "trip_type": "City",
        "hotel_id": 1,  # Hotel Arts Barcelona
        "total_cost": 3840,
    })
    for day, (title, items) in enumerate(SAMPLE_DAYS, start=1):
        store.create_trip_detail({
            "trip_id": trip.id,
            "day": day,
            "title": title,
            "activities": [{"time": t, "description": desc} for t, desc in items],
        })
    store.create_budget_allocation({
        "trip_id": trip.id,
        "accommodation": 800, "transportation": 300, "food": 400,
        "activities": 200, "miscellaneous": 300,
    })

    guides = [store.create_tour_guide(g) for g in TOUR_GUIDES]
    elena = guides[0]
    for review in ELENA_REVIEWS:
        store.create_tour_guide_review({**review, "tour_guide_id": elena.id})
    for photo in ELENA_PHOTOS:
        store.create_tour_guide_photo({**photo, "tour_guide_id": elena.id})
