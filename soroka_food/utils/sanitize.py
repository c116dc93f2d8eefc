# soroka_food/utils/sanitize.py
"""
Allow-list HTML sanitizer for user/editor supplied rich text.

Everything not named in the policy is removed (not escaped):
    sanitize_html('<a href="x" onclick="evil()">link</a>')  ->  '<a href="x">link</a>'

Elements whose body is code or markup rather than readable text (script,
style, iframe, ...) are dropped together with their content.
"""
from dataclasses import dataclass
from typing import FrozenSet

import bleach
from bs4 import BeautifulSoup


@dataclass(frozen=True)
class SanitizePolicy:
    tags: FrozenSet[str]
    attributes: FrozenSet[str]
    allow_data_attributes: bool = False
    protocols: FrozenSet[str] = frozenset({
        "http", "https", "ftp", "ftps", "mailto", "tel", "callto", "sms", "cid", "xmpp", "matrix",
    })
    drop_content_tags: FrozenSet[str] = frozenset({
        "script", "style", "template", "noscript", "iframe", "object", "embed", "textarea", "title",
    })

    def allows_attribute(self, tag: str, name: str, value: str) -> bool:
        # bleach calls this for every attribute on an allowed tag
        if name.startswith("data-"):
            return self.allow_data_attributes
        return name in self.attributes


DEFAULT_POLICY = SanitizePolicy(
    tags=frozenset({"p", "br", "strong", "em", "u", "h2", "h3", "ul", "ol", "li", "a"}),
    attributes=frozenset({"href", "target", "rel"}),
)


def _drop_content_tags(html: str, names: FrozenSet[str]) -> str:
    soup = BeautifulSoup(html, "html.parser")
    found = soup.find_all(sorted(names))
    if not found:
        return html
    for el in found:
        # nested matches go with their already-removed ancestor
        if not el.decomposed:
            el.decompose()
    return str(soup)


def sanitize_html(html: str, policy: SanitizePolicy = DEFAULT_POLICY) -> str:
    """Return `html` reduced to the tags/attributes allowed by `policy`."""
    if not html:
        return ""
    drop = policy.drop_content_tags - policy.tags
    if drop:
        html = _drop_content_tags(html, drop)
    return bleach.clean(
        html,
        tags=policy.tags,
        attributes=policy.allows_attribute,
        protocols=policy.protocols,
        strip=True,
        strip_comments=True,
    )
