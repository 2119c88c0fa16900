"""Default confirmation gate."""


def approve_all(description, target):
    return True
