"""Platform-engineer intent rules: infrastructure as code, Kubernetes, cloud platforms.

Tooling rules run before these ones. Both deal with configuration files,
but tooling owns build/lint/bundler config while this table owns IaC,
cluster manifests and cloud infrastructure; on overlap tooling wins by order.

Short acronyms (EKS, RTO, IaC...) are fenced with ASCII-letter look-arounds
so they don't fire inside ordinary words ("weeks", "purpose") while still
matching when a Korean particle is attached ("EKS로").

Confidence levels:
    0.95  Terraform, Pulumi, CDK, Helm, Argo CD, Flux, Kustomize
    0.90  Kubernetes, managed clusters, workload identity, GitOps, IaC
    0.85  multi-cloud, cost optimization, disaster recovery, Korean phrasing
"""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

PLATFORM_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"terraform"), 0.95, "Terraform"),
    PatternRule(rx(r"pulumi"), 0.95, "Pulumi"),
    PatternRule(rx(r"aws.?cdk"), 0.95, "AWS CDK"),
    PatternRule(rx(r"(?<![a-z])helm(?![a-z])"), 0.95, "Helm chart"),
    PatternRule(rx(r"argocd|argo.?cd"), 0.95, "Argo CD"),
    PatternRule(rx(r"flux.?cd|fluxcd"), 0.95, "Flux CD"),
    PatternRule(rx(r"kubernetes|k8s"), 0.9, "Kubernetes"),
    PatternRule(rx(r"kustomize|kustomization"), 0.95, "Kustomize"),
    PatternRule(rx(r"kubectl|kubeconfig"), 0.9, "Kubectl"),
    PatternRule(
        rx(r"k8s.{0,80}manifest|manifest.{0,80}k8s|kubernetes.{0,80}manifest"),
        0.9,
        "K8s manifest",
    ),
    PatternRule(rx(r"(?<![a-z])(?:EKS|GKE|AKS)(?![a-z])"), 0.9, "Managed Kubernetes"),
    PatternRule(rx(r"(?<![a-z])IRSA(?![a-z])|workload.?identity"), 0.9, "Workload identity"),
    PatternRule(rx(r"인프라\s*(?:코드|설정|관리|자동화)"), 0.85, "Korean: infrastructure"),
    PatternRule(
        rx(r"infrastructure.?as.?code|(?<![a-z])IaC(?![a-z])"), 0.9, "Infrastructure as Code"
    ),
    PatternRule(rx(r"gitops"), 0.9, "GitOps"),
    PatternRule(rx(r"multi.?cloud|hybrid.?cloud"), 0.85, "Multi-cloud"),
    PatternRule(rx(r"finops|cloud.?cost|비용\s*최적화"), 0.85, "Cloud cost optimization"),
    PatternRule(
        rx(r"disaster.?recovery|(?<![a-z])(?:RTO|RPO)(?![a-z])"), 0.85, "Disaster recovery"
    ),
)
