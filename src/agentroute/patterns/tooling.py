"""Tooling-engineer intent rules: config files, build tools, package management.

Checked right after the agent-architect rules and before platform rules, so
a config file that also mentions infrastructure ("webpack helm values")
stays with tooling.

Confidence levels:
    0.98       this project's own config file
    0.95       specific config file names (tsconfig, vite.config, eslint)
    0.85-0.90  bundlers, lock files, generic config extensions, Korean phrasing
"""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

TOOLING_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"\.?agentroute(?:\.config|\.json)"), 0.98, "agentroute config"),
    PatternRule(rx(r"tsconfig[\w.-]{0,40}\.json"), 0.95, "TypeScript config"),
    PatternRule(rx(r"eslint"), 0.95, "ESLint config"),
    PatternRule(rx(r"prettier"), 0.95, "Prettier config"),
    PatternRule(rx(r"stylelint"), 0.95, "Stylelint config"),
    PatternRule(rx(r"vite\.config"), 0.95, "Vite config"),
    PatternRule(rx(r"next\.config"), 0.95, "Next.js config"),
    PatternRule(rx(r"webpack"), 0.9, "Webpack config"),
    PatternRule(rx(r"rollup\.config"), 0.9, "Rollup config"),
    PatternRule(rx(r"package\.json"), 0.9, "Package.json"),
    PatternRule(rx(r"yarn\.lock|pnpm-lock|package-lock"), 0.85, "Lock files"),
    PatternRule(rx(r"\.config\.(?:js|ts|mjs|cjs|json)$"), 0.85, "Config file extension"),
    PatternRule(rx(r"설정\s*(?:파일|변경|수정)"), 0.85, "Korean: config file"),
    PatternRule(rx(r"빌드\s*(?:설정|도구|환경)"), 0.85, "Korean: build config"),
    PatternRule(rx(r"패키지\s*(?:관리|설치|업데이트|의존성)"), 0.85, "Korean: package management"),
    PatternRule(rx(r"린터|린트\s*설정"), 0.85, "Korean: linter config"),
)
