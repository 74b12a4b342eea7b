"""Enums for CLI options."""

from enum import Enum


class Template(str, Enum):
    """Available application templates."""

    TRADING_BOT = "trading-bot"
    TOKEN_LAUNCHER = "token-launcher"
    PORTFOLIO_TRACKER = "portfolio-tracker"
    ARBITRAGE_BOT = "arbitrage-bot"
    DEFI_YIELD_FARM = "defi-yield-farm"
    NFT_MARKETPLACE = "nft-marketplace"
    CROSS_CHAIN_BRIDGE = "cross-chain-bridge"
    ANALYTICS_DASHBOARD = "analytics-dashboard"
    GAMEFI_PLATFORM = "gamefi-platform"
    DEFI_BANK = "defi-bank"

    @property
    def label(self) -> str:
        labels: dict[Template, str] = {
            Template.TRADING_BOT: "Trading Bot",
            Template.TOKEN_LAUNCHER: "Token Launcher",
            Template.PORTFOLIO_TRACKER: "Portfolio Tracker",
            Template.ARBITRAGE_BOT: "Arbitrage Bot",
            Template.DEFI_YIELD_FARM: "DeFi Yield Farm",
            Template.NFT_MARKETPLACE: "NFT Marketplace",
            Template.CROSS_CHAIN_BRIDGE: "Cross-Chain Bridge",
            Template.ANALYTICS_DASHBOARD: "Analytics Dashboard",
            Template.GAMEFI_PLATFORM: "GameFi Platform",
            Template.DEFI_BANK: "DeFi Bank",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Template, str] = {
            Template.TRADING_BOT: "Automated trading with limit orders, DCA, and portfolio management.",  # noqa: E501
            Template.TOKEN_LAUNCHER: "Deploy and manage your own tokens with vesting and fees.",
            Template.PORTFOLIO_TRACKER: "Monitor and analyze your crypto portfolio across chains.",
            Template.ARBITRAGE_BOT: "Find and execute profitable arbitrage opportunities.",
            Template.DEFI_YIELD_FARM: "Automated yield farming and liquidity management.",
            Template.NFT_MARKETPLACE: "Create and manage an NFT trading platform.",
            Template.CROSS_CHAIN_BRIDGE: "Build a multi-chain asset bridge.",
            Template.ANALYTICS_DASHBOARD: "Real-time crypto analytics and insights.",
            Template.GAMEFI_PLATFORM: "Play-to-earn gaming with crypto rewards.",
            Template.DEFI_BANK: "Complete decentralized banking solution.",
        }
        return descriptions[self]


class Frontend(str, Enum):
    """Frontend frameworks that can be added next to the backend."""

    NEXTJS = "nextjs"
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    NONE = "none"

    @property
    def label(self) -> str:
        labels: dict[Frontend, str] = {
            Frontend.NEXTJS: "Next.js (recommended)",
            Frontend.REACT: "React + Vite",
            Frontend.VUE: "Vue.js",
            Frontend.SVELTE: "Svelte",
            Frontend.NONE: "None (backend only)",
        }
        return labels[self]

    @property
    def dev_url(self) -> str | None:
        urls: dict[Frontend, str | None] = {
            Frontend.NEXTJS: "http://localhost:3000",
            Frontend.REACT: "http://localhost:5173",
            Frontend.VUE: "http://localhost:5174",
            Frontend.SVELTE: "http://localhost:5175",
            Frontend.NONE: None,
        }
        return urls[self]


class Blockchain(str, Enum):
    """Target chain for the generated application."""

    BASE = "base"
    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    UNICHAIN = "unichain"
    SOLANA = "solana"

    @property
    def label(self) -> str:
        labels: dict[Blockchain, str] = {
            Blockchain.BASE: "Base (recommended) - fast, low-cost, gas sponsorship",
            Blockchain.ETHEREUM: "Ethereum - the original smart contract platform",
            Blockchain.POLYGON: "Polygon - low-cost with Polymarket integration",
            Blockchain.UNICHAIN: "Unichain - Uniswap's native L2",
            Blockchain.SOLANA: "Solana - high-speed, limited gas sponsorship",
        }
        return labels[self]


class Performance(str, Enum):
    """Performance engine used by the generated application."""

    ACCELERATED = "rust"
    STANDARD = "javascript"

    @property
    def label(self) -> str:
        labels: dict[Performance, str] = {
            Performance.ACCELERATED: "Rust + WebAssembly (recommended)",
            Performance.STANDARD: "JavaScript - standard Node.js performance",
        }
        return labels[self]
