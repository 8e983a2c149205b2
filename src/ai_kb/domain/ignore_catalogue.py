"""Paths excluded from normal include patterns across all projects.

Entries are globs relative to the project root. Explicit includes (``+``)
and excludes (``-``) are resolved without this list.
"""

# fmt: off
GLOBAL_IGNORES = (
    # Node.js
    "node_modules/**",
    "package-lock.json",
    "npm-debug.log",
    # Yarn
    "yarn.lock",
    "yarn-error.log",
    # pnpm
    "pnpm-lock.yaml",
    # Bun
    "bun.lockb",
    # Deno
    "deno.lock",
    # PHP (Composer)
    "vendor/**",
    "composer.lock",
    # Python
    "__pycache__/**",
    "**/*.pyc",
    "**/*.pyo",
    "**/*.pyd",
    ".Python",
    "pip-log.txt",
    "pip-delete-this-directory.txt",
    ".venv/**",
    "venv/**",
    "ENV/**",
    "env/**",
    # Ruby
    "Gemfile.lock",
    ".bundle/**",
    # Java
    "target/**",
    "**/*.class",
    # Gradle
    ".gradle/**",
    "build/**",
    # Maven
    "pom.xml.tag",
    "pom.xml.releaseBackup",
    "pom.xml.versionsBackup",
    "pom.xml.next",
    # .NET
    "bin/**",
    "obj/**",
    "**/*.suo",
    "**/*.user",
    # Go
    "go.sum",
    # Rust
    "Cargo.lock",
    "target/**",
    # Version control and OS files
    ".git/**",
    ".svn/**",
    ".hg/**",
    ".DS_Store",
    "Thumbs.db",
    # Environment variables
    ".env",
    ".env.local",
    ".env.development.local",
    ".env.test.local",
    ".env.production.local",
    "**/*.env",
    "**/*.env.*",
    # Framework build caches
    ".svelte-kit/**",
    ".next/**",
    ".nuxt/**",
    ".vuepress/**",
    ".cache/**",
    "dist/**",
    "tmp/**",
    # Our own output files
    "ai-kb-*.md",
)
# fmt: on
