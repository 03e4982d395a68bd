"""Runtime settings for stale-options.

Everything comes from the runner environment. A local .env file is loaded
first so the action can be exercised outside a workflow with the same
``INPUT_*`` and ``GITHUB_*`` variables.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# owner/repo of the repository the run operates on; scopes filter terms.
GITHUB_REPOSITORY = os.getenv("GITHUB_REPOSITORY", "")

# File the runner reads step outputs from. Unset outside a workflow.
GITHUB_OUTPUT = os.getenv("GITHUB_OUTPUT") or None

# The runner sets RUNNER_DEBUG=1 when step debug logging is enabled.
RUNNER_DEBUG = os.getenv("RUNNER_DEBUG") == "1"
LOG_LEVEL = "DEBUG" if RUNNER_DEBUG else os.getenv("STALE_OPTIONS_LOG_LEVEL", "INFO")

# Named input carrying the JSON override block.
JSON_CONFIG_INPUT = "json-config"

# Environment variables whose values are masked in every log line.
REDACT_ENV_NAMES = ("INPUT_REPO-TOKEN", "GITHUB_TOKEN")
