from cmsgrid.utils.versioning import live_version


def normalize_page(page, stages=None):
    live = live_version(page)

    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "seo": page.seo or {},
        "live_version": live.version if live else None,
    }

    if stages is not None:
        data["modified"] = stages.stages_differ_recursive(page)

    return data
