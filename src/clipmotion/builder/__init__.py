"""Registry builder: source files -> validated registry item JSON + index."""

from clipmotion.builder.orchestrator import INDEX_FILENAME, BuildResult, build_registry

__all__ = ["INDEX_FILENAME", "BuildResult", "build_registry"]
