"""
Client Prismic (API REST v2): lecture seule des documents du CMS.
- Résout la ref "master" du repository puis interroge /documents/search.
- Les erreurs de transport ou de format sont converties en UpstreamError.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from storefront import config
from storefront.checkout.errors import UpstreamError

logger = logging.getLogger(__name__)

_client: Optional["PrismicClient"] = None


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class PrismicClient:
    def __init__(
        self,
        endpoint: str,
        access_token: str = "",
        timeout: float = 10.0,
        http: Optional[httpx.Client] = None,
    ):
        if not endpoint:
            raise UpstreamError("PRISMIC_API_ENDPOINT / PRISMIC_REPOSITORY manquant")
        self.endpoint = endpoint.rstrip("/")
        self.access_token = access_token
        self._http = http or httpx.Client(timeout=timeout)

    def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if self.access_token:
            params = {**params, "access_token": self.access_token}
        try:
            resp = self._http.get(url, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Prismic a répondu {e.response.status_code} pour {url}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Prismic injoignable: {e}") from e
        except json.JSONDecodeError as e:
            raise UpstreamError(f"Réponse Prismic non JSON: {e}") from e

    def get_master_ref(self) -> str:
        """
        Retourne la ref "master" (contenu publié) du repository.
        """
        api = self._get(self.endpoint, {})
        for ref in api.get("refs") or []:
            if ref.get("isMasterRef"):
                return ref["ref"]
        raise UpstreamError("Aucune ref master dans la réponse Prismic")

    def get_by_uid(self, document_type: str, uid: str, ref: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Récupère un document par (type, uid).
        - ref: ref explicite (prévisualisation); sinon la ref master
        - Retour: le document brut, ou None si aucun document ne correspond
        """
        params = {
            "ref": ref or self.get_master_ref(),
            "q": f'[[at(my.{document_type}.uid,"{_quote(uid)}")]]',
            "pageSize": 1,
        }
        payload = self._get(f"{self.endpoint}/documents/search", params)
        results = payload.get("results") or []
        if not results:
            logger.info("cms.get_by_uid miss type=%s uid=%s", document_type, uid)
            return None
        return results[0]

    def close(self) -> None:
        self._http.close()


def get_cms_client() -> PrismicClient:
    global _client
    if _client is None:
        _client = PrismicClient(
            config.PRISMIC_API_ENDPOINT,
            access_token=config.PRISMIC_ACCESS_TOKEN,
            timeout=config.PRISMIC_TIMEOUT,
        )
    return _client


def close_cms_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
