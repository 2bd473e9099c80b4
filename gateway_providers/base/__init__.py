"""
Gateway Base Package

Backend-agnostic contracts and infrastructure shared by every adapter:

- Models: canonical chat messages, options and responses
- Errors: normalized error taxonomy and classification
- Streaming: lifecycle events, SSE framing, sinks and the adapter loop
- Registry and routing: identity → adapter, model → identity
- Logging, timeouts and the pooled HTTP client

Import from the submodules directly; this package module stays import-light.
"""
