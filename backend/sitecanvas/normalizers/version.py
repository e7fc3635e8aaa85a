def normalize_version_summary(summary):
    return {
        "id": summary.id,
        "website_id": summary.website_id,
        "version_number": summary.version_number,
        "page_count": summary.page_count,
        "created_by": summary.created_by,
        "created_at": summary.created_at.isoformat() if summary.created_at else None,
    }


def normalize_version(version, include_pages=True):
    data = {
        "id": version.id,
        "website_id": version.website_id,
        "version_number": version.version_number,
        "global_settings": version.global_settings or {},
        "created_by": version.created_by,
        "created_at": version.created_at.isoformat() if version.created_at else None,
    }

    if include_pages:
        data["pages"] = version.pages or []

    return data
