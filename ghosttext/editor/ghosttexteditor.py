"""
module ghosttext.editor.ghosttexteditor

Contains the definition of the GhostTextEditor class, a multiline prompt_toolkit
editing session wired to a SuggestionEngine
"""

from typing import Any, Dict, List, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.processors import Processor
from prompt_toolkit.styles import (
    BaseStyle,
    merge_styles,
    Style,
    style_from_pygments_cls,
)
from pygments.style import Style as PygmentsStyle
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import Token

from .. import constants
from ..config import GhostTextConfig
from ..engine import SuggestionEngine, SuggestionObserver, SuggestionProvider
from ..surface.backends.prompt_toolkit import BufferSurface, GhostTextProcessor
from .exceptions import UserExit


class GhostTextEditor:
    """
    class GhostTextEditor

    A multiline prompt_toolkit editing session wired to a SuggestionEngine.
    Tab accepts the displayed suggestion, Escape rejects it, Ctrl-T toggles
    autocomplete and F5 (or Escape followed by Enter) finishes editing
    """

    config: GhostTextConfig
    __engine: SuggestionEngine
    __session: PromptSession
    __surface: BufferSurface

    def __init__(
        self: "GhostTextEditor",
        config: GhostTextConfig,
        get_suggestion: SuggestionProvider,
        observer: SuggestionObserver | None = None,
    ) -> None:
        self.config = config

        self.__session = PromptSession(
            bottom_toolbar=self._get_bottom_toolbar,
            key_bindings=self._default_key_bindings,
            multiline=True,
            prompt_continuation=self._prompt_continuation,  # type: ignore
            style=merge_styles(
                [
                    style_from_pygments_cls(self._get_style_for_config()),
                    self._default_style,
                ]
            ),
        )

        self.__surface = BufferSurface(self.__session.default_buffer)
        self.__engine = SuggestionEngine(
            self.__surface, get_suggestion, config=config, observer=observer
        )
        self.__surface.attach(self.__engine)

        # the processors need the surface, which needs the session's buffer
        self.__session.input_processors = self._default_input_processors

    @property
    def _default_input_processors(self: "GhostTextEditor") -> List[Processor]:
        return [GhostTextProcessor(self.__surface)]

    @property
    def _default_key_bindings(self: "GhostTextEditor") -> KeyBindings:
        bindings: KeyBindings = KeyBindings()

        @bindings.add("tab")
        def binding_tab(event: KeyPressEvent) -> None:
            if self.engine.accept():
                return

            # map tab to spaces when there is nothing to accept
            event.current_buffer.insert_text(
                " "
                * (
                    constants.SPACES_IN_TAB
                    - event.current_buffer.document.cursor_position_col
                    % constants.SPACES_IN_TAB
                )
            )

        @bindings.add(Keys.Escape)
        def binding_escape(_: KeyPressEvent) -> None:
            self.engine.reject()

        @bindings.add("c-t")
        def binding_ctrl_t(_: KeyPressEvent) -> None:
            self.engine.set_enabled(not self.engine.enabled)

        @bindings.add(Keys.F5)
        def binding_f5(event: KeyPressEvent) -> None:
            event.current_buffer.validate_and_handle()

        return bindings

    @property
    def _default_style(self: "GhostTextEditor") -> BaseStyle:
        # pylint: disable=protected-access
        style_for_config = self._get_style_for_config()
        colors: Dict[Any, str] = {
            token_type: (
                style_for_config._styles[token_type][0]  # type: ignore
                if style_for_config._styles[token_type][0] != ""  # type: ignore
                else "ffffff"
            )
            for token_type in (Token.Comment, Token.Name.Builtin, Token.Text)
        }
        # pylint: enable=protected-access

        return Style.from_dict(
            {
                "bottom-toolbar": f"bg:#222222 fg:#{colors[Token.Text]} noreverse",
                "bottom-toolbar.key": f"bg:#222222 fg:#{colors[Token.Name.Builtin]} noreverse",
                "bottom-toolbar.text": "fg:darkgray",
                "ghost-text": self.config.suggestion_style,
                "line-number": f"fg:#{colors[Token.Comment]}",
                "prompt": f"fg:#{colors[Token.Name.Builtin]} bold",
            }
        )

    async def edit(self: "GhostTextEditor", initial_text: str = "") -> str:
        """
        Runs one editing session and returns the committed text. Any displayed
        suggestion is not part of the result

        Args:
            initial_text (str): The text to populate the editor with

        Returns:
            str: The text the user committed

        Raises:
            UserExit: If the user requested that the session should be ended
        """

        try:
            return await self.__session.prompt_async(
                [("class:prompt", "1".rjust(3) + "  ")], default=initial_text
            )
        except EOFError as eof:
            raise UserExit("EOFError while editing") from eof
        except KeyboardInterrupt:
            return ""
        finally:
            # leaving the prompt is the editor's equivalent of losing focus
            self.engine.handle_blur()

    @property
    def engine(self: "GhostTextEditor") -> SuggestionEngine:
        return self.__engine

    def _get_bottom_toolbar(self: "GhostTextEditor") -> List[Tuple[str, str]]:
        return [
            ("class:bottom-toolbar.text", "ghost text "),
            ("class:bottom-toolbar.key", "on" if self.engine.enabled else "off"),
            ("class:bottom-toolbar.text", "  "),
            ("class:bottom-toolbar.key", "[Tab]"),
            ("class:bottom-toolbar.text", " Accept "),
            ("class:bottom-toolbar.key", "[Esc]"),
            ("class:bottom-toolbar.text", " Reject "),
            ("class:bottom-toolbar.key", "[^T]"),
            ("class:bottom-toolbar.text", " Toggle "),
            ("class:bottom-toolbar.key", "[F5]"),
            ("class:bottom-toolbar.text", " Done"),
        ]

    def _get_style_for_config(self: "GhostTextEditor") -> type[PygmentsStyle]:
        return (
            get_style_by_name(self.config.color_scheme)
            if self.config.color_scheme in get_all_styles()
            else get_style_by_name(constants.DEFAULT_COLOR_SCHEME)
        )

    def _prompt_continuation(
        self: "GhostTextEditor", width: int, line_number: int, is_soft_wrap: bool
    ) -> List[Tuple[str, str]]:
        if (
            not is_soft_wrap
            and len(line_number_str := str(line_number + 1)) < width - 1
        ):
            return [("class:line-number", line_number_str.rjust(width - 2) + "  ")]

        return [("", "...".ljust(width))]

    @property
    def session(self: "GhostTextEditor") -> PromptSession:
        return self.__session

    @property
    def surface(self: "GhostTextEditor") -> BufferSurface:
        return self.__surface
