"""Lascorbe blog theme.

This package holds the configuration and theme of the lascorbe.com blog.
Content arrives already rendered to HTML; the package maps it into complete
HTML documents, one per page kind (index, section, post, page, tag list
and tag details).

Modules:
- site: Site metadata, sections and social links.
- config: Loading site configuration from YAML.
- content: Read-only content model (items, pages, sections, tags).
- context: Queries over the content of one publishing run.
- nodes: Template functions returning markup fragments.
- theme: Assembles fragments into documents per page kind.
- website: Publish entry point.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
