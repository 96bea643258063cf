"""Labels and explanations shown by the wizard."""

LABELS = {
    "exe": "Create executable",
    "coc": "Add CODE_OF_CONDUCT.md",
    "changelog": "Add CHANGELOG.md",
    "ext": "Native extension",
    "git": "Initialize git",
    "github_username": "GitHub username",
    "mit": "Include MIT license",
    "test": "Test framework",
    "ci": "CI provider",
    "linter": "Linter",
    "edit": "Editor command",
    "bundle_install": "Run bundle install",
}

HELP_TEXT = {
    "exe": "Adds an executable file in exe/ so users can run your gem as a command.",
    "coc": "Adds a code of conduct template for contributors.",
    "changelog": "Adds CHANGELOG.md to track release notes.",
    "ext": "Sets up native extension scaffolding for C, Go, or Rust.",
    "git": "Initializes a git repository for the new gem.",
    "github_username": "Used in links and metadata for your GitHub account.",
    "mit": "Adds the MIT license file.",
    "test": "Chooses which test framework files to generate.",
    "ci": "Chooses CI pipeline config to include.",
    "linter": "Chooses linting setup for style and quality checks.",
    "edit": "Sets your preferred command for opening files.",
    "bundle_install": "Runs bundle install after generating the gem.",
}

_TEXT_CHOICES = {
    "set": "enter a value now",
    "none": "leave unset",
}

CHOICE_HELP = {
    "ext": {
        "c": "classic native extension path",
        "go": "Go-based extension via FFI/tooling",
        "rust": "Rust extension path",
        "none": "no native extension",
    },
    "test": {
        "minitest": "small built-in Ruby test style",
        "rspec": "popular behavior-style testing",
        "test-unit": "xUnit-style test framework",
        "none": "no test framework files",
    },
    "ci": {
        "circle": "CircleCI config",
        "github": "GitHub Actions workflow",
        "gitlab": "GitLab CI pipeline",
        "none": "no CI config",
    },
    "linter": {
        "rubocop": "full-featured Ruby linting",
        "standard": "zero-config style linting",
        "none": "no linter config",
    },
    "github_username": _TEXT_CHOICES,
    "edit": _TEXT_CHOICES,
}
