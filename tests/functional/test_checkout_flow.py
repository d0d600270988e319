import pytest

from storefront.checkout.trigger import checkout
from storefront.checkout.errors import RequestError


def test_trigger_against_app_navigates_to_stripe(client, fake_cms, mock_stripe):
    visited = []
    url = checkout(client=client, navigate=visited.append)
    assert visited == [url] == ["https://checkout.stripe.com/c/pay/cs_test_123"]
    # la clé générée par le déclencheur est transmise à Stripe
    assert mock_stripe[0]["idempotency_key"]
    assert fake_cms.calls == [("product", "vapor75")]


def test_trigger_unknown_product_does_not_navigate(client, fake_cms, mock_stripe):
    visited = []
    with pytest.raises(RequestError) as exc:
        checkout("does-not-exist", client=client, navigate=visited.append)
    assert exc.value.status_code == 404
    assert visited == []
    assert mock_stripe == []
