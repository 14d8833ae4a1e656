# Standard keypad, four columns; "=" spans two.
STANDARD_BUTTONS = [
    "C", "±", "%", "÷",
    "7", "8", "9", "×",
    "4", "5", "6", "-",
    "1", "2", "3", "+",
    "0", ".", "=",
]

SCIENTIFIC_BUTTONS = [
    "sin", "cos", "tan",
    "log", "ln", "^",
    "(", ")", "π", "e",
    "√", "x²", "x³", "x!",
]

WIDE_BUTTONS = {"="}

GRID_COLUMNS = 4

THEMES = {
    "light": {
        "background": "linear-gradient(135deg, #bfdbfe 0%, #d8b4fe 100%)",
        "panel": "#ffffff",
        "display_bg": "#f3f4f6",
        "text": "#1f2937",
    },
    "dark": {
        "background": "linear-gradient(135deg, #111827 0%, #312e81 100%)",
        "panel": "#1f2937",
        "display_bg": "#374151",
        "text": "#ffffff",
    },
}
