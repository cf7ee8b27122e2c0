# Filename: ppemarts/share.py
# Social share targets for the "share this page" buttons.

from typing import Dict
from urllib.parse import quote

FACEBOOK_QUOTE = "Check out PPE Marts - Find PPE kits and calculate your requirements!"
TWITTER_TEXT = "PPE Marts - PPE kits and calculator tools for safety professionals"
EMAIL_SUBJECT = "Check out PPE Marts - PPE Calculator & Products"


def _enc(s: str) -> str:
    # same escaping as JS encodeURIComponent
    return quote(s, safe="-_.!~*'()")


def share_links(page_url: str) -> Dict[str, str]:
    url = _enc(page_url)
    body = (
        f"I found this useful PPE website:\n\n{page_url}\n\n"
        "It has PPE calculators and affiliate links to safety products."
    )
    return {
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={url}&quote={_enc(FACEBOOK_QUOTE)}",
        "twitter": f"https://twitter.com/intent/tweet?url={url}&text={_enc(TWITTER_TEXT)}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={url}",
        "email": f"mailto:?subject={_enc(EMAIL_SUBJECT)}&body={_enc(body)}",
    }
