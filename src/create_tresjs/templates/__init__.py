"""
create_tresjs.templates - Project Template Trees
================================================

One directory per :class:`~create_tresjs.models.TemplateKind`. Each tree
is copied verbatim into the new project, then:

- ``README.md`` and ``package.json`` have ``{{projectName}}`` replaced
- ``package.json`` gets dependencies and scripts merged in
- ``_gitignore`` is renamed to ``.gitignore``

Available Templates
-------------------
vue/
    Vue 3 + Vite single page app (``index.html``, ``src/main.ts``)

nuxt/
    Nuxt 3 app using the ``@tresjs/nuxt`` module

Keep template ``package.json`` files free of the packages the generator
adds itself (TypeScript toolchain, ESLint, ecosystem packages).
"""

# This file intentionally left mostly empty.
# Template trees are located on disk by the generator.
