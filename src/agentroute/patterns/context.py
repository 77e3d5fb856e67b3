"""File path rules for context-based agent inference.

Ordered by specificity: the first rule whose agent is available wins, so
exact file names come before bare extensions, and ``.entity.ts`` is listed
ahead of the generic ``.ts`` frontend rule. Frontend extensions sit at 0.7,
below the acceptance floor, so a bare ``.tsx`` path never overrides the
default agent on its own.
"""

from __future__ import annotations

from agentroute.patterns.models import ContextRule, rx

CONTEXT_RULES: tuple[ContextRule, ...] = (
    # Mobile
    ContextRule(rx(r"react-native\.config\.js$"), "mobile-developer", 0.95),
    ContextRule(rx(r"metro\.config\.js$"), "mobile-developer", 0.95),
    ContextRule(rx(r"(?:^|/)app\.json$"), "mobile-developer", 0.85),
    ContextRule(rx(r"pubspec\.yaml$"), "mobile-developer", 0.95),
    ContextRule(rx(r"\.dart$"), "mobile-developer", 0.9),
    ContextRule(rx(r"Podfile$"), "mobile-developer", 0.9),
    ContextRule(rx(r"\.swift$"), "mobile-developer", 0.9),
    ContextRule(rx(r"build\.gradle(?:\.kts)?$"), "mobile-developer", 0.85),
    ContextRule(rx(r"AndroidManifest\.xml$"), "mobile-developer", 0.9),
    ContextRule(rx(r"\.kt$"), "mobile-developer", 0.85),
    # Data
    ContextRule(rx(r"\.sql$"), "data-engineer", 0.9),
    ContextRule(rx(r"schema\.prisma$"), "data-engineer", 0.95),
    ContextRule(rx(r"migrations?/"), "data-engineer", 0.9),
    ContextRule(rx(r"\.entity\.ts$"), "data-engineer", 0.85),
    # Platform / IaC
    ContextRule(rx(r"\.tf$"), "platform-engineer", 0.95),
    ContextRule(rx(r"\.tfvars$"), "platform-engineer", 0.95),
    ContextRule(rx(r"terragrunt\.hcl$"), "platform-engineer", 0.95),
    ContextRule(rx(r"Chart\.yaml$"), "platform-engineer", 0.95),
    ContextRule(rx(r"values\.yaml$"), "platform-engineer", 0.75),
    ContextRule(
        rx(r"helm.{0,200}templates/|charts/.{0,200}templates/"), "platform-engineer", 0.9
    ),
    ContextRule(rx(r"kustomization\.ya?ml$"), "platform-engineer", 0.95),
    ContextRule(rx(r"Pulumi\.ya?ml$"), "platform-engineer", 0.95),
    ContextRule(rx(r"argocd/|argo-cd/"), "platform-engineer", 0.9),
    ContextRule(rx(r"flux-system/"), "platform-engineer", 0.9),
    # DevOps
    ContextRule(rx(r"Dockerfile|docker-compose"), "devops-engineer", 0.9),
    # Backend
    ContextRule(rx(r"\.go$"), "backend-developer", 0.85),
    ContextRule(rx(r"\.py$"), "backend-developer", 0.85),
    ContextRule(rx(r"\.java$"), "backend-developer", 0.85),
    ContextRule(rx(r"\.rs$"), "backend-developer", 0.85),
    # Frontend
    ContextRule(rx(r"\.tsx?$"), "frontend-developer", 0.7),
    ContextRule(rx(r"\.jsx?$"), "frontend-developer", 0.7),
    # Agent definitions
    ContextRule(rx(r"agents?.{0,200}\.json$"), "agent-architect", 0.8),
)
