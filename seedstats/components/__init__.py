"""Components layer - domain logic building blocks.

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, persistence, other components

Architecture:
- helpers/ = stdlib-only utilities and DTOs (pure, stateless)
- persistence/ = seed storage backends
- components/ = corpus, analyzers, reports (this layer)
- workflows/ = orchestration of components + persistence
- services/ = configuration, long-lived state
- interfaces/ = CLI presentation
"""
