###########EXTERNAL IMPORTS############

#######################################

#############LOCAL IMPORTS#############

#######################################

##########     W I N D O W     E X C E P T I O N S     ##########


class WindowDurationError(ValueError):
    """Raised when a window duration is negative, not finite or of an unsupported type."""

    pass
