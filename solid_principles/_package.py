"""Package metadata and naming constants."""

PACKAGE_NAME = "solid-principles-by-example"
CLI_NAME = "solid-principles"
DESCRIPTION = "Paired Bad/Good Python snippets for the five SOLID principles"
