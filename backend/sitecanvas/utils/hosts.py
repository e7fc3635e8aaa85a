def normalize_host(host):
    """
    Lower-case a Host header value and drop its port and trailing dot.

    "Shop.Example.COM:8443" -> "shop.example.com", "[::1]:5000" -> "::1".
    """
    host = (host or "").strip().lower()

    if host.startswith("["):
        end = host.find("]")
        if end != -1:
            host = host[1:end]
    elif host.count(":") == 1:
        host = host.split(":", 1)[0]

    return host.rstrip(".")


def subdomain_label(host, platform_domain):
    """Return "shop" for "shop.<platform_domain>", else None. Nested labels do not match."""
    platform_domain = normalize_host(platform_domain)
    suffix = f".{platform_domain}"
    if not platform_domain or not host.endswith(suffix):
        return None

    label = host[: -len(suffix)]
    if not label or "." in label:
        return None
    return label
