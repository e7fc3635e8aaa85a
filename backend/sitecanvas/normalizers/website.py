def normalize_website(website):
    return {
        "id": website.id,
        "user_id": website.user_id,
        "name": website.name,
        "subdomain": website.subdomain,
        "custom_domain": website.custom_domain,
        "domain_status": website.domain_status,
        "status": website.status,
        "published_version_id": website.published_version_id,
        "last_published_at": website.last_published_at.isoformat() if website.last_published_at else None,
        "global_settings": website.global_settings or {},
        "created_at": website.created_at.isoformat() if website.created_at else None,
    }
