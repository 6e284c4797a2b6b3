"""clipmotion: animation component registry builder and installer.

Import from submodules:
- version: __version__
- builder: build_registry (registry JSON artifacts + index.json)
- installer: DependencyResolver, ProjectFileWriter, merge_utils_file
"""

from clipmotion.version import __version__ as __version__
