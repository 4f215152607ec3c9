def str_to_bool(val):
    """Parse a true/false setting such as CF_VERIFY_TLS

    Args:
        val(str): The raw value from the environment, or an already parsed default

    Returns:
        True/False: The value of the setting
        None: The value is not a recognised true/false phrase, load_config rejects it

    """
    val = str(val).strip().lower()

    if val in ('1', 'true', 'yes', 'on', 't', 'y'):
        return True
    if val in ('0', 'false', 'no', 'off', 'f', 'n', 'none', ''):
        return False

    return None
