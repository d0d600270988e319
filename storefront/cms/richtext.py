"""
Helpers rich text Prismic (lecture seule).
"""
from typing import Any, Dict, List, Optional, Union

RichText = Union[str, List[Dict[str, Any]], None]

# module storefront.cms.richtext
def as_text(field: RichText, separator: str = " ") -> Optional[str]:
    """
    Convertit un champ rich text Prismic en texte brut.
    - field: liste de blocs [{"type": "paragraph", "text": "...", "spans": [...]}, ...]
      (une chaîne est acceptée telle quelle, pour les champs key text)
    - Les blocs sans texte (images, embeds) sont ignorés.
    - Retourne None si le champ est vide ou ne contient aucun texte.
    """
    if field is None:
        return None
    if isinstance(field, str):
        return field.strip() or None
    texts = []
    for block in field:
        if not isinstance(block, dict):
            continue
        text = block.get("text")
        if isinstance(text, str) and text:
            texts.append(text)
    joined = separator.join(texts).strip()
    return joined or None
