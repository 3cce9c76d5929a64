from __future__ import annotations

# Parser adapters turn source text into a ParsedSource.
# Language modules are imported on demand so that the core stays free of tree-sitter.
