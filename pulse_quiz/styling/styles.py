"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QSpinBox, QComboBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 10px;
                margin-top: 8px;
                padding-top: 12px;
            }}
            QGroupBox QWidget {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.DARK) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f" color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            " border-radius: 8px; padding: 10px 18px; font-weight: bold;"
        )

    @staticmethod
    def get_option_button_style(letter: str, font_size: int) -> str:
        color = ColorPalette.OPTION_COLORS[letter]
        return (
            f"QPushButton {{ background-color: {color}; color: #FFFFFF; border: none;"
            f" border-radius: 10px; padding: 18px; font-size: {font_size}pt;"
            " font-weight: bold; text-align: left; }"
            "QPushButton:disabled { background-color: #8E7CC3; color: #EDE7F6; }"
        )

    @staticmethod
    def get_result_banner_style(correct: bool, theme: Theme = Theme.DARK) -> str:
        color = ColorPalette.SUCCESS.get(theme) if correct else ColorPalette.ERROR.get(theme)
        return f"border-top: 8px solid {color}; padding: 24px; font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_option_badge_style(letter: str) -> str:
        return (
            f"background-color: {ColorPalette.OPTION_COLORS[letter]}; color: #FFFFFF;"
            " font-weight: bold; border-radius: 6px; padding: 6px; qproperty-alignment: AlignCenter;"
        )

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.DARK) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_timer_style(font_size: int, warning: bool, theme: Theme = Theme.DARK) -> str:
        style = f"padding: 2px 6px; border-radius: 4px; font-size: {font_size}pt;"
        if warning:
            style += f" color: #FFFFFF; background-color: {ColorPalette.WARNING.get(theme)};"
        return style

    @staticmethod
    def get_large_label_style(font_size: int = 16) -> str:
        return f"font-size: {font_size}pt; font-weight: bold;"
