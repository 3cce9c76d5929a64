"""
Tree-sitter query definitions for Go language.
Contains S-expression queries for comments and eligible containers.
"""

from __future__ import annotations

QUERIES = {
    # Comments
    "comments": """
    (comment) @comment
    """,

    # Function bodies, struct bodies and var/const declarations.
    # Declarations are filtered afterwards: only the parenthesized group form is a container.
    "containers": """
    (function_declaration
      body: (block) @function_body)

    (method_declaration
      body: (block) @function_body)

    (func_literal
      body: (block) @function_body)

    (struct_type
      (field_declaration_list) @struct_body)

    (var_declaration) @var_declaration

    (const_declaration) @const_declaration
    """,
}
