"""Marketing copy generation for product names."""
from __future__ import annotations

import json
import logging
from typing import Any

from resizer.services import llm
from resizer.utils.copy_fallback import placeholder_description

logger = logging.getLogger(__name__)


PROMPT_TEMPLATE = (
    "You are an e-commerce copywriting expert specialised in Amazon and eBay listings. "
    'For the product: "{product_name}", write 2 short descriptions (1-2 sentences each) '
    "in the exact Amazon/eBay style: open with a strong technical claim, name the key "
    "technology or specification (driver size, codec, battery life, number of microphones, "
    "materials, wattage, etc.) and then translate it into the concrete benefit for the buyer. "
    'Use structures like "[Technology/Specification] — [direct benefit]". Never use poetic '
    'language, metaphors or empty phrases such as "elevate your experience", "immerse '
    'yourself" or "oasis". Be direct, technical and focused on real value. If you do not '
    "know the exact specifications of the product, infer realistic values representative "
    "of this type of product. Return STRICTLY a JSON array of 2 strings, with no markdown "
    "and no explanations."
)


def build_prompt(product_name: str) -> str:
    return PROMPT_TEMPLATE.format(product_name=product_name.strip())


def parse_variants(text: str) -> Any:
    """Parse the model output as JSON; non-JSON text becomes a one-item list."""

    text = text.strip()
    try:
        return json.loads(text)
    except ValueError:
        logger.info("Copy response was not valid JSON; returning it verbatim")
        return [text]


async def generate_copy(product_name: str) -> Any:
    """Ask the configured LLM for two listing descriptions of *product_name*.

    The call is made once. Any failure of the call itself is logged and
    replaced by the placeholder string so the caller never sees an error.
    """

    prompt = build_prompt(product_name)
    try:
        text = await llm.complete(prompt, json_mode=True)
    except Exception as exc:  # noqa: BLE001
        logger.error("LLM copy generation failed: %s", exc)
        return placeholder_description(reason=str(exc))
    return parse_variants(text)
