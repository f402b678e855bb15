from ioencrypt.models import (NationType, bcolors)
from ioencrypt.core import (DEFAULT_PARAMS, encode15, decode15)

# -----------------------------
# Interactive Configuration Helpers
# -----------------------------
def options():
    """
    Prompt for the user key and nation shared by both menu actions.

    Returns:
        Tuple of (user_key, nation)
    """
    user_key = input("User key (max 15 bytes): ")
    names = "/".join(n.name.lower() for n in NationType)
    default = DEFAULT_PARAMS.nation.name.lower()
    nation = input(f"Nation ({names}) [{default}]: ").strip() or default
    return user_key, nation

# -----------------------------
# Menu Actions
# -----------------------------
def menu_encode():
    """
    Interactive Encode15: encrypt a short string and print its hex form.

    The ciphertext has the same byte length as the plaintext, so at most
    15 bytes of UTF-8 text are accepted.
    """
    plain = input("Plaintext (max 15 bytes): ")
    user_key, nation = options()
    cipher = encode15(plain, user_key, nation)
    if cipher is None:
        print(f"{bcolors.FAIL}Encode failed, see log for details{bcolors.ENDC}")
        return
    print(f"Ciphertext: {bcolors.OKGREEN}{cipher}{bcolors.ENDC}")

def menu_decode():
    """Interactive Decode15: recover the text behind an Encode15 hex string."""
    cipher = input("Ciphertext (hex): ").strip()
    user_key, nation = options()
    plain = decode15(cipher, user_key, nation)
    if plain is None:
        print(f"{bcolors.FAIL}Decode failed, see log for details{bcolors.ENDC}")
        return
    print(f"Plaintext: {bcolors.OKGREEN}{plain}{bcolors.ENDC}")
