def normalize_navigation(navigation):
    return {
        "id": navigation.id,
        "website_id": navigation.website_id,
        "name": navigation.name,
        "items": navigation.items or [],
    }
