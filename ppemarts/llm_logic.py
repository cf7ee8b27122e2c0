# Filename: ppemarts/llm_logic.py
# Safety-assistant replies.
#  - One OpenAI chat completion when OPENAI_API_KEY is configured
#  - Any upstream failure degrades to keyword-matched canned replies
#  - Single public entry point: `respond()`

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from openai import OpenAI

from ppemarts import utils
from ppemarts.models import HistoryTurn

logger = logging.getLogger(__name__)

_SYS_PROMPT_SAFETY = (
    "You are an AI Safety Assistant for PPE Marts, a Personal Protective Equipment affiliate website. "
    "You provide expert advice on safety equipment, regulations (OSHA, ANSI, etc.), and product recommendations.\n"
    "\n"
    "Available PPE categories:\n"
    "1. Respiratory (masks, respirators)\n"
    "2. Head Protection (helmets, hard hats)\n"
    "3. Eye Protection (goggles, glasses)\n"
    "4. Hearing Protection (ear plugs, muffs)\n"
    "5. Hand Protection (gloves)\n"
    "6. Body Protection (vests, suits, gowns)\n"
    "7. Foot Protection (safety shoes, boots)\n"
    "8. Fall Protection (harnesses, lanyards)\n"
    "\n"
    "Guidelines:\n"
    "- Always prioritize safety\n"
    "- Mention relevant standards when applicable\n"
    "- Recommend specific product types, not brands unless asked\n"
    "- Be concise but thorough\n"
    "- Include practical usage tips\n"
    "- When recommending products, suggest the category first\n"
    "\n"
    "Format responses naturally and helpfully."
)

# Checked top to bottom; the first keyword found in the message wins.
# "chemical glove" sits above "glove" so the narrower answer can be reached.
FALLBACK_REPLIES: Tuple[Tuple[str, str], ...] = (
    # Construction
    ("construction",
     "For construction work, OSHA requires: hard hat (ANSI Z89.1), safety glasses, high-vis vest, "
     "steel-toe boots (ASTM F2413), and gloves. Additional PPE needed for specific tasks: hearing "
     "protection for loud areas, respirators for dust, fall protection for heights over 6 feet."),
    ("hard hat",
     "Hard hats must be ANSI Z89.1 certified. Types: Class G (general, 2,200V), Class E (electrical, "
     "20,000V), Class C (conductive, no voltage protection). Replace after any significant impact or "
     "every 5 years."),
    # Gloves
    ("chemical glove",
     "For chemical protection: Nitrile for oils/solvents, Butyl rubber for ketones/esters, Neoprene for "
     "acids/alcohols, Viton for chlorinated/aromatic solvents. Check chemical compatibility charts."),
    ("glove",
     "Select gloves based on hazard: Chemical - nitrile/rubber, Cut - Kevlar/metal mesh, Heat - "
     "aluminized/leather, Cold - insulated, General - leather/canvas. Ensure proper fit and dexterity."),
    # Respiratory
    ("respirator",
     "Respirator types: N95 for particles, half-face for gases/vapors with cartridges, full-face for "
     "eye/respiratory combo, PAPR for comfort in extended use. Fit testing required annually."),
    ("mask",
     "Mask types: Surgical - fluid resistance, N95 - 95% particle filtration, KN95 - Chinese standard, "
     "FFP2 - European standard. Ensure proper seal and replace when damaged/soiled."),
    # Fall protection
    ("fall",
     "Fall protection system: Full-body harness, shock-absorbing lanyard (6 ft max), anchor point "
     "(5,000 lb rating), rescue plan. Inspect before each use. OSHA requires training."),
    ("harness",
     "Harness features: Dorsal D-ring for fall arrest, shoulder D-rings for retrieval, side D-rings for "
     "positioning, chest D-ring for ladder climbing. Fit: 1-2 fingers between leg straps and thighs."),
    # Foot
    ("safety shoe",
     "Safety shoe standards: ASTM F2413 for impact/compression, EH for electrical hazard, SD for static "
     "dissipative, PR for puncture resistant. Match to workplace hazards."),
    # Eye
    ("goggle",
     "Eye protection: Safety glasses for impact, goggles for chemical splash, face shields for face/eye "
     "combo, welding helmets for arc flash. ANSI Z87.1 certification required."),
    # General
    ("osha",
     "Key OSHA PPE standards: 1910.132 (General Requirements), 1910.133 (Eye/Face), 1910.134 "
     "(Respiratory), 1910.135 (Head), 1910.136 (Foot), 1910.137 (Electrical), 1910.138 (Hand)."),
    ("regulation",
     "PPE regulations vary by: Industry (construction, healthcare, manufacturing), Country (OSHA-US, "
     "CE-Europe), Hazard type. Always consult local regulations and conduct hazard assessments."),
)

DEFAULT_REPLY = (
    "I'm here to help with PPE safety! I can assist with product selection, safety regulations, hazard "
    "assessments, and proper usage guidelines. Please ask about specific equipment or safety scenarios."
)

_client: Optional[OpenAI] = None


def get_client() -> Optional[OpenAI]:
    """Lazily build the OpenAI client; None when no API key is configured."""
    global _client
    if not utils.OPENAI_API_KEY:
        return None
    if _client is None:
        # one attempt only; failures go to the keyword fallback instead of SDK retries
        _client = OpenAI(
            api_key=utils.OPENAI_API_KEY,
            timeout=utils.OPENAI_TIMEOUT,
            max_retries=0,
        )
    return _client


def build_messages(message: str, history: Iterable[HistoryTurn] = ()) -> List[dict]:
    """System briefing, then prior turns, then the new user message."""
    messages = [{"role": "system", "content": _SYS_PROMPT_SAFETY}]
    for turn in history:
        role = "user" if turn.sender == "user" else "assistant"
        messages.append({"role": role, "content": turn.text})
    messages.append({"role": "user", "content": message})
    return messages


def fallback_reply(message: str) -> str:
    lower = message.lower()
    for keyword, reply in FALLBACK_REPLIES:
        if keyword in lower:
            return reply
    return DEFAULT_REPLY


def llm_safety_reply(client: OpenAI, message: str, history: Sequence[HistoryTurn] = ()) -> str:
    """
    One chat completion. Raises on any upstream problem, including an empty
    or malformed completion, so the caller can decide on the fallback.
    """
    completion = client.chat.completions.create(
        model=utils.OPENAI_MODEL,
        messages=build_messages(message, history),
        max_tokens=utils.OPENAI_MAX_TOKENS,
        temperature=utils.OPENAI_TEMPERATURE,
    )
    choices = getattr(completion, "choices", None) or []
    if not choices:
        raise ValueError("completion returned no choices")
    content = choices[0].message.content
    if not isinstance(content, str) or not content.strip():
        raise ValueError("completion returned empty content")
    return content


def respond(message: str, history: Sequence[HistoryTurn] = (), client: Optional[OpenAI] = None) -> str:
    """Reply to `message`; OpenAI when available, canned keyword replies otherwise."""
    if client is None:
        client = get_client()

    if client is not None:
        try:
            text = llm_safety_reply(client, message, history)
            logger.info(f"[LLM OK] model={utils.OPENAI_MODEL} chars={len(text)}")
            return text
        except Exception as e:
            logger.warning(f"OpenAI API failed, using fallback: {type(e).__name__}: {e}")

    return fallback_reply(message)
