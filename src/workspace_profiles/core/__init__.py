# src/workspace_profiles/core/__init__.py
"""
Core do Workspace Profiles.

Componentes:
    - errors / exceptions → catálogo e hierarquia de erros de decodificação
    - fields              → extração tipada de campos de payloads dinâmicos
    - config              → configurações do decoder (YAML/JSON + deep-merge)

O core não conhece entidades concretas; elas vivem em `workspace_profiles.entity`.
"""
