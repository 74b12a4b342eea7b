"""Derived files built from the answers alone: package.json, .env.example, .gitignore."""

from __future__ import annotations

import json
from typing import Any

from create_bankr_app.cli._answers import Answers

OPTIONAL_INTEGRATION = "@bankr/cli"

_BASE_DEPENDENCIES: dict[str, str] = {
    "dotenv": "^16.4.5",
    "node-fetch": "^3.3.2",
    "chalk": "^5.3.0",
    "inquirer": "^9.2.12",
    "fs-extra": "^11.1.1",
    "zod": "^3.22.4",
    "@bankr/sdk": "^1.0.0",
    "viem": "^2.0.0",
    "axios": "^1.6.0",
    "winston": "^3.11.0",
}

ACCELERATED_DEPENDENCIES: dict[str, str] = {
    "@bankr/rust-crypto": "^1.0.0",
    "@bankr/rust-trading": "^1.0.0",
    "@bankr/rust-analytics": "^1.0.0",
}

_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.3.3",
    "tsx": "^4.6.2",
    "@types/node": "^20.0.0",
}

_ESSENTIALS_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.1.4",
}

NO_BUILD_STEP = 'echo "No build step required"'
NO_TESTS = 'echo "Tests not included"'


def _scripts(answers: Answers) -> dict[str, str]:
    if answers.typescript:
        scripts = {
            "start": "node dist/src/index.js",
            "dev": "tsx watch src/index.ts",
            "build": "tsc",
        }
    else:
        scripts = {
            "start": "node src/index.js",
            "dev": "node src/index.js",
            "build": NO_BUILD_STEP,
        }
    scripts["test"] = "node --test" if answers.include_essentials else NO_TESTS
    return scripts


def build_manifest(answers: Answers) -> dict[str, Any]:
    """Build the project's package.json content. Pure: depends only on *answers*."""
    dependencies = dict(_BASE_DEPENDENCIES)
    if answers.accelerated:
        dependencies.update(ACCELERATED_DEPENDENCIES)

    dev_dependencies: dict[str, str] = {}
    if answers.typescript:
        dev_dependencies.update(_TYPESCRIPT_DEV_DEPENDENCIES)
    if answers.include_essentials:
        dev_dependencies.update(_ESSENTIALS_DEV_DEPENDENCIES)

    return {
        "name": answers.project_name,
        "version": "1.0.0",
        "description": f"A {answers.template.value} built with Bankr",
        "main": "dist/src/index.js" if answers.typescript else "src/index.js",
        "type": "module",
        "scripts": _scripts(answers),
        "dependencies": dependencies,
        "peerDependencies": {OPTIONAL_INTEGRATION: ">=1.0.0"},
        "peerDependenciesMeta": {OPTIONAL_INTEGRATION: {"optional": True}},
        "devDependencies": dev_dependencies,
        "keywords": ["bankr", "crypto", answers.template.value, answers.blockchain.value],
        "author": "Bankr Developer",
        "license": "MIT",
    }


def build_tsconfig(answers: Answers) -> dict[str, Any] | None:
    """Compiler options for typed projects; ``None`` when TypeScript is off."""
    if not answers.typescript:
        return None
    return {
        "compilerOptions": {
            "target": "ES2022",
            "module": "NodeNext",
            "moduleResolution": "NodeNext",
            "rootDir": ".",
            "outDir": "dist",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "resolveJsonModule": True,
        },
        "include": ["src", "shared"],
        "exclude": ["node_modules", "dist", "frontend"],
    }


def to_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


def render_manifest(answers: Answers) -> str:
    return to_json(build_manifest(answers))


def render_env_example(answers: Answers) -> str:
    """Environment template. Credentials are placeholders, never read from the environment."""
    typescript = "true" if answers.typescript else "false"
    return f"""\
# Bankr API Configuration
# Option 1: Use @bankr/cli (recommended)
#   npm install -g @bankr/cli
#   bankr login email user@example.com
#   Your app will automatically use the authentication!

# Option 2: Manual API key
#   Get your API key from https://bankr.bot/api
BANKR_API_KEY=your_api_key_here
BANKR_BASE_URL=https://api.bankr.bot

# Bankr SDK signer (required by the generated app)
BANKR_PRIVATE_KEY=your_private_key_here

# @bankr/cli Integration (optional)
# If you have separate LLM gateway key
# BANKR_LLM_KEY=your_llm_key_here
# BANKR_LLM_URL=https://llm.bankr.bot

# Project Configuration
PROJECT_NAME={answers.project_name}
TEMPLATE={answers.template.value}
BLOCKCHAIN={answers.blockchain.value}
TYPESCRIPT={typescript}

# Trading Configuration (if applicable)
DEFAULT_CHAIN={answers.blockchain.value}
TRADE_AMOUNT_USD=10
MAX_TRADES_PER_HOUR=20

# Token Configuration (if applicable)
TOKEN_NAME=MyToken
TOKEN_SYMBOL=MTK
TOKEN_VAULT_PERCENTAGE=20
TOKEN_VESTING_DAYS=30
"""


GITIGNORE = """\
# Dependencies
node_modules/
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Environment variables
.env
.env.local
.env.development.local
.env.test.local
.env.production.local

# Build outputs
dist/
build/

# Logs
logs
*.log

# Runtime data
pids
*.pid
*.seed
*.pid.lock

# IDE
.vscode/
.idea/
*.swp
*.swo

# OS
.DS_Store
Thumbs.db
"""
