"""Configuration models for kubectx-cli.

``ToolConfig`` holds the tool's own settings. ``Kubeconfig`` mirrors the
parts of a kubeconfig file this tool reads and writes; every model allows
extra fields so clusters, users, preferences and unknown keys survive a
load/save cycle untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NAMESPACE = "default"


class ToolConfig(BaseModel):
    """kubectx-cli settings (config.json)."""

    kubeconfig: str | None = Field(
        default=None, description="Kubeconfig path (overrides ~/.kube/config)"
    )
    history_dir: str | None = Field(
        default=None, description="Directory holding previous-selection files"
    )
    default_namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace reported when a context sets none",
    )
    color: bool = Field(default=True)
    current_style: str = Field(
        default="bold yellow", description="Rich style for the active entry"
    )


class ContextDetails(BaseModel):
    """The ``context`` mapping of a kubeconfig context entry."""

    model_config = ConfigDict(extra="allow")

    cluster: str | None = None
    user: str | None = None
    namespace: str | None = None

    def to_yaml_dict(self) -> dict[str, Any]:
        """Dump without the known keys that were never given a value."""
        data = self.model_dump()
        for name in type(self).model_fields:
            if data.get(name) is None:
                data.pop(name, None)
        return data


class NamedContext(BaseModel):
    """A named entry of the kubeconfig ``contexts`` list."""

    model_config = ConfigDict(extra="allow")

    name: str
    context: ContextDetails = Field(default_factory=ContextDetails)

    @field_validator("context", mode="before")
    @classmethod
    def validate_context(cls, v: Any) -> Any:
        # `context:` with no body parses as None
        return {} if v is None else v


class Kubeconfig(BaseModel):
    """A kubeconfig document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="v1", alias="apiVersion")
    kind: str = Field(default="Config")
    current_context: str = Field(default="", alias="current-context")
    contexts: list[NamedContext] = Field(default_factory=list)

    @field_validator("current_context", mode="before")
    @classmethod
    def validate_current_context(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("contexts", mode="before")
    @classmethod
    def validate_contexts(cls, v: Any) -> Any:
        return [] if v is None else v

    def context_names(self) -> list[str]:
        """Names of all contexts, in file order."""
        return [ctx.name for ctx in self.contexts]

    def has_context(self, name: str) -> bool:
        return any(ctx.name == name for ctx in self.contexts)

    def get_context(self, name: str) -> NamedContext:
        """Get context by name."""
        for ctx in self.contexts:
            if ctx.name == name:
                return ctx
        raise ValueError(f"Context '{name}' not found")

    def use_context(self, name: str) -> NamedContext:
        """Make a context current."""
        ctx = self.get_context(name)
        self.current_context = ctx.name
        return ctx

    def remove_context(self, name: str):
        """Remove a context by name."""
        original_len = len(self.contexts)
        self.contexts = [ctx for ctx in self.contexts if ctx.name != name]
        if len(self.contexts) == original_len:
            raise ValueError(f"Context '{name}' not found")
        return True

    def rename_context(self, old_name: str, new_name: str):
        """Rename a context, following it with current-context."""
        for ctx in self.contexts:
            if ctx.name == old_name:
                ctx.name = new_name
                if self.current_context == old_name:
                    self.current_context = new_name
                return True
        raise ValueError(f"Context '{old_name}' not found")

    def set_namespace(self, context_name: str, namespace: str):
        """Set the namespace of a context entry."""
        self.get_context(context_name).context.namespace = namespace

    def to_yaml_dict(self) -> dict[str, Any]:
        """Dump back to the on-disk key layout.

        Unknown keys are written back as loaded, nulls included.
        """
        data = self.model_dump(by_alias=True)
        for entry, ctx in zip(data["contexts"], self.contexts):
            entry["context"] = ctx.context.to_yaml_dict()
        return data
