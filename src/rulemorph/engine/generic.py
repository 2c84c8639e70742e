"""
Generic fallback for pairs with neither templates nor a dedicated chain.
"""

from rulemorph.config.models import Language


def generic_translation(code: str, source: Language, target: Language) -> str:
    """Echo the source as target-language comments, with conversion guidance."""
    c = target.comment_prefix
    src = source.display_name
    tgt = target.display_name

    banner = [
        f"{c} Rule-based translation from {src} to {tgt}",
        f"{c} Manual conversion required for complex syntax",
        f"{c} Original {src} code:",
        "",
    ]
    commented = [f"{c} {line}" for line in code.split("\n")]
    guidance = [
        "",
        f"{c} Convert the above {src} code to {tgt} by hand.",
        f"{c} This is a basic fallback. For better results:",
        f"{c} 1. Retry once the primary translation service is available",
        f"{c} 2. Translate via Python, which has dedicated rule chains",
    ]
    return "\n".join(banner + commented + guidance)
