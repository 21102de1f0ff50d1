"""Bundled company memory documents, in the order they are merged."""

MEMORY_DOCUMENTS: tuple[str, ...] = (
    "company-overview.md",
    "product-shopify-app.md",
    "engineering-guidelines.md",
    "support-playbook.md",
)
