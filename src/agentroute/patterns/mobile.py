"""Mobile-developer intent rules.

Checked last: "mobile develop..." style rules are greedy and would otherwise
claim prompts that merely mention the Mobile Developer agent.
"""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

MOBILE_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"react.?native"), 0.95, "React Native"),
    PatternRule(rx(r"flutter"), 0.95, "Flutter"),
    PatternRule(rx(r"(?<![a-z])expo(?![a-z])"), 0.9, "Expo"),
    PatternRule(rx(r"swiftui"), 0.95, "SwiftUI"),
    PatternRule(rx(r"jetpack\s*compose"), 0.95, "Jetpack Compose"),
    PatternRule(rx(r"모바일\s*(?:앱|개발|화면)"), 0.9, "Korean: mobile app"),
    PatternRule(rx(r"mobile\s*(?:app|develop|screen)"), 0.9, "Mobile app"),
    PatternRule(rx(r"iOS\s*(?:앱|개발)"), 0.9, "iOS app"),
    PatternRule(rx(r"android\s*(?:앱|개발)"), 0.9, "Android app"),
)
