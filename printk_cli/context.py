"""Shared CLI context with lazy-initialized dependencies."""

from printk.colors import Color
from printk.config import PrintkConfig
from printk.icons import IconRegistry, default_registry
from printk.renderer import Renderer


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Global options given on the command line override the environment
    configuration.

    Usage:
        ctx = CLIContext()
        ctx.renderer.write_line("{info} Hello")
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        color: Color | None = None,
        no_icons: bool = False,
        config: PrintkConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging
            quiet: If True, suppress non-error logging
            color: Foreground color overriding PRINTK_COLOR
            no_icons: If True, disable icon substitution
            config: Preloaded configuration (loaded from env when omitted)
        """
        self.verbose = verbose
        self.quiet = quiet
        self.color = color
        self.no_icons = no_icons

        # Lazy-loaded dependencies
        self._config: PrintkConfig | None = config
        self._registry: IconRegistry | None = None
        self._renderer: Renderer | None = None

    @property
    def config(self) -> PrintkConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PrintkConfig.from_env()
        return self._config

    @property
    def registry(self) -> IconRegistry:
        """Get icon registry (lazy-loaded)."""
        if self._registry is None:
            self._registry = default_registry()
        return self._registry

    @property
    def renderer(self) -> Renderer:
        """Get renderer configured from env and global options (lazy-loaded)."""
        if self._renderer is None:
            renderer_config = self.config.renderer_config()
            if self.color is not None:
                renderer_config = renderer_config.with_color(self.color)
            if self.no_icons:
                renderer_config = renderer_config.with_icons(False)
            self._renderer = Renderer(renderer_config, self.registry)
        return self._renderer


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
