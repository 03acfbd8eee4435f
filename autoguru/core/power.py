"""Horsepower model for the AutoGuru simulation core."""

HP_CONSTANT: float = 5252.0


def horsepower(torque: float, rpm: float) -> float:
    """Convert torque at a given engine speed to horsepower.

        horsepower = torque * rpm / 5252

    Args:
        torque: Engine torque.
        rpm: Engine speed (>= 0).

    Returns:
        Horsepower.
    """
    return torque * rpm / HP_CONSTANT
