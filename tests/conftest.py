import os

# Clé factice avant l'import de l'app: STRIPE_SECRET_KEY est obligatoire au démarrage
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")

import pytest
from typing import Any, Dict, Generator, List, Optional
from fastapi.testclient import TestClient

from storefront.app_setup.factory import create_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/tests/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeCMS:
    """CMS en mémoire: {uid: document Prismic}."""

    def __init__(self, documents: Optional[Dict[str, Dict[str, Any]]] = None):
        self.documents = documents or {}
        self.calls: List[tuple] = []

    def get_by_uid(self, document_type: str, uid: str, ref: Optional[str] = None):
        self.calls.append((document_type, uid))
        return self.documents.get(uid)

    def get_master_ref(self) -> str:
        return "master-ref"


def make_document(uid: str = "vapor75", **data) -> Dict[str, Any]:
    return {"id": f"doc-{uid}", "uid": uid, "type": "product", "data": data}


@pytest.fixture(scope="session")
def app():
    return create_app()

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def fake_cms(monkeypatch) -> FakeCMS:
    cms = FakeCMS({
        "vapor75": make_document("vapor75", name="Vapor75", price=49.99),
        "nimbus": make_document(
            "nimbus",
            name="Nimbus",
            price=89,
            image={"url": "https://images.prismic.io/perfume/nimbus.png"},
            description=[
                {"type": "paragraph", "text": "Notes of rain.", "spans": []},
                {"type": "paragraph", "text": "Cedar base.", "spans": []},
            ],
        ),
        "unnamed": make_document("unnamed", name=None, price=10),
        "unpriced": make_document("unpriced", name="Unpriced", price=None),
    })
    monkeypatch.setattr("storefront.cms.client.get_cms_client", lambda: cms)
    return cms

@pytest.fixture
def mock_stripe(monkeypatch):
    """Remplace stripe.checkout.Session.create; enregistre les appels."""
    import stripe

    calls: List[Dict[str, Any]] = []

    def _fake_create(**kwargs):
        calls.append(kwargs)
        return {"id": "cs_test_123", "url": "https://checkout.stripe.com/c/pay/cs_test_123"}

    monkeypatch.setattr(stripe.checkout.Session, "create", _fake_create)
    return calls
