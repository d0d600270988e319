from typing import Any, Dict

from storefront import config
from storefront.cms import client as cms_client


def health_cms_info() -> Dict[str, Any]:
    """
    Sonde de joignabilité Prismic: ne lève jamais, renvoie un dict d'état.
    """
    info: Dict[str, Any] = {
        "endpoint": config.PRISMIC_API_ENDPOINT or None,
        "connect_ok": False,
        "ref": None,
        "error": None,
    }
    try:
        info["ref"] = cms_client.get_cms_client().get_master_ref()
        info["connect_ok"] = True
    except Exception as e:
        info["error"] = str(e)
    return info
