# city_guide/agents/fallbacks.py

from typing import List

from city_guide.models.schemas import (
    HotelRecommendation,
    PlaceRecommendation,
    RestaurantRecommendation,
)


def fallback_places(city: str) -> List[PlaceRecommendation]:
    return [
        PlaceRecommendation(name=f"{city} City Center", secondaryInfo="Main tourist area of the city"),
        PlaceRecommendation(name=f"{city} Historical District", secondaryInfo="Explore the rich history and culture"),
        PlaceRecommendation(name=f"{city} Local Market", secondaryInfo="Experience local cuisine and shopping"),
        PlaceRecommendation(name=f"{city} Park/Garden", secondaryInfo="Relax in beautiful natural surroundings"),
        PlaceRecommendation(name=f"{city} Museum", secondaryInfo="Learn about local art and history"),
    ]


def fallback_hotels() -> List[HotelRecommendation]:
    return [
        HotelRecommendation(name="Grand Hotel", rating="4.5", price="Luxury", address="City center location"),
        HotelRecommendation(name="Comfort Inn", rating="4.0", price="Mid-range", address="Near tourist attractions"),
        HotelRecommendation(name="Budget Lodge", rating="3.5", price="Budget", address="Affordable accommodation"),
        HotelRecommendation(name="Business Hotel", rating="4.2", price="Mid-range", address="Convenient for business travelers"),
        HotelRecommendation(name="Boutique Hotel", rating="4.8", price="Luxury", address="Unique and charming atmosphere"),
    ]


def fallback_restaurants() -> List[RestaurantRecommendation]:
    return [
        RestaurantRecommendation(name="Local Bistro", cuisine="International", rating="4.5", address="City center dining"),
        RestaurantRecommendation(name="Traditional Restaurant", cuisine="Local Cuisine", rating="4.2", address="Authentic local flavors"),
        RestaurantRecommendation(name="Cafe Central", cuisine="Cafe", rating="4.0", address="Perfect for coffee and light meals"),
        RestaurantRecommendation(name="Fine Dining", cuisine="Gourmet", rating="4.8", address="Upscale dining experience"),
        RestaurantRecommendation(name="Street Food Corner", cuisine="Street Food", rating="4.3", address="Local street food experience"),
    ]
