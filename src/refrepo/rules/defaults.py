"""Global ignore patterns applied to every collection.

Patterns use gitignore syntax and are rendered with a ``**/`` prefix so they
match at any depth. Order matters: a later pattern overrides an earlier one,
so negations (``!``) must follow the broader rule they carve out of.
"""

from __future__ import annotations

from typing import Final

GLOBAL_IGNORE_PATTERNS: Final[tuple[str, ...]] = (
    # Lock files
    "pnpm-lock.yaml",
    "package-lock.json",
    "yarn.lock",
    "bun.lockb",
    "bun.lock",
    # Build artifacts
    "dist/",
    "build/",
    "es/",
    ".output/",
    ".next/",
    ".nuxt/",
    ".svelte-kit/",
    ".vinxi/",
    ".nx/",
    ".tshy/",
    "node_modules/",
    # Build and deploy caches
    ".turbo/",
    ".vercel/",
    ".wrangler/",
    ".vite/",
    ".cache/",
    ".parcel-cache/",
    ".rollup.cache/",
    ".server-tmp/",
    "app-build/",
    # Non-target framework sources
    "*.svelte",
    "*.vue",
    "*.astro",
    # Excluded deployment targets
    "wrangler.jsonc",
    "wrangler.toml",
    "worker-configuration.d.ts",
    "drizzle/",
    "drizzle.config.ts",
    # Generated code
    "_generated/",
    "*.gen.ts",
    "*.gen.js",
    # VCS and CI metadata
    ".git/",
    ".github/",
    ".changeset/",
    "codecov.yml",
    "labeler-config.yml",
    ".gitattributes",
    # Project meta docs
    "CONTRIBUTING.md",
    "FUNDING.json",
    # Tests and fixtures
    "*.test.ts",
    "*.test.tsx",
    "*.test.js",
    "*.test.jsx",
    "*.spec.ts",
    "*.spec.tsx",
    "*.test.*.ts",
    "tests/fixtures/",
    "__fixtures__/",
    "test-results/",
    "coverage/",
    "__snapshots__/",
    "*.snap",
    "*.notest.*",
    "*.test-d.ts",
    # Tooling config (turbo.json is kept)
    "biome.json",
    "knip.json",
    "knip.jsonc",
    "tsdown.config.ts",
    "tsup.config.ts",
    ".prettierrc*",
    ".eslintrc*",
    "eslint.config.*",
    "vitest.config.*",
    "jest.config.*",
    "playwright.config.*",
    # Archives and databases
    "*.zip",
    "*.tar.gz",
    "*.rar",
    "*.db",
    "*.sqlite",
    "*.sqlite3",
    "site.webmanifest",
    # Media
    "media/",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.ico",
    "*.svg",
    "*.webp",
    "*.woff*",
    "*.ttf",
    "*.eot",
    "*.pdf",
    # Environment secrets
    ".env",
    ".env.*",
    "!.env.example",
    # IDE and editor state
    ".vscode/",
    ".idea/",
    ".cursor/",
    ".claude/",
    ".cspell/",
    ".cspell.json",
    ".cspell.jsonc",
    # OS metadata
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    # Local backend state (holds auth tokens)
    ".convex/",
    # Logs
    "*.log",
    "npm-debug.log*",
    "yarn-debug.log*",
    "yarn-error.log*",
    "pnpm-debug.log*",
    # TypeScript build cache
    "*.tsbuildinfo",
)
