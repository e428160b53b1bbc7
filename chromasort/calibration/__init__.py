from .matrix import (
    CalibrationMatrix,
    ChannelCorrection,
    IDENTITY,
    apply_calibration,
    compute_calibration,
    np_apply_calibration,
)

__all__ = [
    'CalibrationMatrix',
    'ChannelCorrection',
    'IDENTITY',
    'apply_calibration',
    'compute_calibration',
    'np_apply_calibration',
]
