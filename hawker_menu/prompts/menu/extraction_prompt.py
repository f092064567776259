# extraction_prompt.py
"""
Prompt for reading dish names and prices off a hawker stall menu photo.
"""

SG_HAWKER_CONTEXT = (
    "Context: The menu is from a hawker stall in SINGAPORE.\n"
    "- Dish names mix English, Malay and Hokkien/Cantonese romanisation (e.g. 'mee goreng', 'nasi lemak', "
    "'bee hoon', 'char kway teow', 'ban mian', 'yong tau foo'). Keep the spelling shown on the board.\n"
    "- Prices are in SGD and usually written as '3.50', '$4', 'S$5.00' or '4/5' for regular/large.\n"
    "- When two prices are shown for sizes, emit one item per size and put the size in the name "
    "(e.g. 'fishball noodle (small)', 'fishball noodle (large)').\n"
)

def build_extraction_prompt() -> str:
    """
    Build the menu OCR prompt.

    Returns:
        Complete prompt string
    """
    prompt = (
        "You are a precise OCR parser for hawker stall menus in Singapore.\n"
        "Return JSON with this exact shape: {\"items\":[{\"name\":string,\"price\":number}]}.\n"
        "Rules:\n"
        "- Extract full dish names with key qualifiers (e.g. protein, style, sauce, size) to improve calorie accuracy.\n"
        "- Example: prefer \"grilled chicken rice (large)\" over \"chicken rice\" if visible.\n"
        "- Exclude blanks, unknown placeholders, and items without names.\n"
        "- Prices must be numbers in SGD (e.g. 3.5). If price is shown as market price/MP or unclear, "
        "set price to null or skip the item.\n"
        "- Ignore phone numbers, addresses, unit prices, QR codes, and promotions.\n"
        "Do not add explanations or code fences.\n\n"
        + SG_HAWKER_CONTEXT
    )
    return prompt
