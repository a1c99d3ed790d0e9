"""Issues stored as Markdown files with YAML front matter: model, IDs, ordering and roadmaps."""

__version__ = "0.1.0"

__all__ = ["bean", "ids", "sorting", "content", "listing", "roadmap"]