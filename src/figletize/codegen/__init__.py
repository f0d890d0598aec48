"""Build-time code generation for figletize.

Bakes rendered banners into a generated Python module, running the same
parse and render pipeline at build time instead of run time.

Key classes:
- BannerSpec: One (member, font, text) banner to generate
- Diagnostic: A problem reported for one banner

Key functions:
- load_specs: Read banner specs from JSON
- generate_module: Render banners into module source
- write_module: Generate and write the module
"""

from figletize.codegen.generator import (
    BannerSpec,
    Diagnostic,
    generate_module,
    load_specs,
    write_module,
)

__all__ = [
    "BannerSpec",
    "Diagnostic",
    "generate_module",
    "load_specs",
    "write_module",
]
