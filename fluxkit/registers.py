"""The 64-register file: general, floating-point, vector and system banks."""

from __future__ import annotations

from enum import IntFlag

BANK_SIZE = 16
VEC_WIDTH = 16

SYS_PC = 0
SYS_SP = 1
SYS_FP = 2
SYS_LR = 3
SYS_FLAGS = 4
SYS_CYCLES = 6

# General registers R11, R12 and R13 alias SP, FP and LR.
SP_ALIAS = 11
FP_ALIAS = 12
LR_ALIAS = 13

_ALIASES = {SP_ALIAS: SYS_SP, FP_ALIAS: SYS_FP, LR_ALIAS: SYS_LR}

_U64_MASK = (1 << 64) - 1


def _to_u64(value: int) -> int:
    return value & _U64_MASK


def _to_i64(value: int) -> int:
    value &= _U64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


class FlagBits(IntFlag):
    """Condition flags kept in system register S4."""

    ZERO = 0x01
    NEGATIVE = 0x02
    CARRY = 0x04
    OVERFLOW = 0x08

    @classmethod
    def from_bits_truncate(cls, bits: int) -> FlagBits:
        """Build flags from raw bits, dropping any unknown bits."""
        return cls(bits & 0x0F)

    @property
    def is_zero(self) -> bool:
        return bool(self & FlagBits.ZERO)

    @property
    def is_negative(self) -> bool:
        return bool(self & FlagBits.NEGATIVE)

    @property
    def is_carry(self) -> bool:
        return bool(self & FlagBits.CARRY)

    @property
    def is_overflow(self) -> bool:
        return bool(self & FlagBits.OVERFLOW)


class RegisterFile:
    """Sixty-four registers in four banks of sixteen.

    General registers hold signed 64-bit integers, floating registers
    hold floats, vector registers hold 16 bytes and system registers
    hold unsigned 64-bit integers. Out-of-range reads give zero and
    out-of-range writes are ignored.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Zero every register."""
        self._gp = [0] * BANK_SIZE
        self._fpr = [0.0] * BANK_SIZE
        self._vec = [bytes(VEC_WIDTH)] * BANK_SIZE
        self._sys = [0] * BANK_SIZE

    def __repr__(self) -> str:
        return f"RegisterFile(pc={self.pc:#x}, sp={self.sp:#x}, cycles={self.cycles})"

    # General purpose

    def read_gp(self, idx: int) -> int:
        if idx in _ALIASES:
            return _to_i64(self._sys[_ALIASES[idx]])
        if 0 <= idx < BANK_SIZE:
            return self._gp[idx]
        return 0

    def write_gp(self, idx: int, value: int) -> None:
        if idx in _ALIASES:
            self._sys[_ALIASES[idx]] = _to_u64(value)
        elif 0 <= idx < BANK_SIZE:
            self._gp[idx] = _to_i64(value)

    # Floating point

    def read_fp(self, idx: int) -> float:
        return self._fpr[idx] if 0 <= idx < BANK_SIZE else 0.0

    def write_fp(self, idx: int, value: float) -> None:
        if 0 <= idx < BANK_SIZE:
            self._fpr[idx] = float(value)

    # Vector

    def read_vec(self, idx: int) -> bytes:
        return self._vec[idx] if 0 <= idx < BANK_SIZE else bytes(VEC_WIDTH)

    def write_vec(self, idx: int, value: bytes) -> None:
        data = bytes(value)
        if len(data) != VEC_WIDTH:
            raise ValueError(f"vector register needs {VEC_WIDTH} bytes, got {len(data)}")
        if 0 <= idx < BANK_SIZE:
            self._vec[idx] = data

    # System

    def read_sys(self, idx: int) -> int:
        return self._sys[idx] if 0 <= idx < BANK_SIZE else 0

    def write_sys(self, idx: int, value: int) -> None:
        if 0 <= idx < BANK_SIZE:
            self._sys[idx] = _to_u64(value)

    # Named system registers

    @property
    def pc(self) -> int:
        return self._sys[SYS_PC]

    @pc.setter
    def pc(self, value: int) -> None:
        self._sys[SYS_PC] = _to_u64(value)

    @property
    def sp(self) -> int:
        return _to_i64(self._sys[SYS_SP])

    @sp.setter
    def sp(self, value: int) -> None:
        self._sys[SYS_SP] = _to_u64(value)

    @property
    def fp(self) -> int:
        """Frame pointer (S2)."""
        return _to_i64(self._sys[SYS_FP])

    @fp.setter
    def fp(self, value: int) -> None:
        self._sys[SYS_FP] = _to_u64(value)

    @property
    def lr(self) -> int:
        return self._sys[SYS_LR]

    @lr.setter
    def lr(self, value: int) -> None:
        self._sys[SYS_LR] = _to_u64(value)

    @property
    def flags(self) -> FlagBits:
        return FlagBits.from_bits_truncate(self._sys[SYS_FLAGS] & 0xFF)

    @flags.setter
    def flags(self, value: FlagBits) -> None:
        self._sys[SYS_FLAGS] = int(value) & 0xFF

    @property
    def cycles(self) -> int:
        return self._sys[SYS_CYCLES]

    def _set_flag(self, flag: FlagBits, on: bool) -> None:
        current = self.flags
        self.flags = (current | flag) if on else (current & ~flag)

    def update_flags_int(self, result: int) -> None:
        """Set ZERO and NEGATIVE from an integer result."""
        self._set_flag(FlagBits.ZERO, result == 0)
        self._set_flag(FlagBits.NEGATIVE, result < 0)

    def update_flags_float(self, result: float) -> None:
        """Set ZERO from a float result."""
        self._set_flag(FlagBits.ZERO, result == 0.0)

    def increment_cycles(self) -> None:
        self._sys[SYS_CYCLES] = _to_u64(self._sys[SYS_CYCLES] + 1)