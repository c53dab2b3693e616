"""
MRZ layouts for ICAO Doc 9303 document sizes.

Check digit windows are flat offsets into the MRZ with line breaks removed.
"""

from __future__ import annotations

from icao_mrtd.mrz.layout import CheckDigitSegment, FieldSegment, FillerSegment, MRZLayout

# Part 5: TD1 size documents, 3 lines of 30
TD1 = MRZLayout(
    "TD1",
    30,
    (
        (
            FieldSegment("type_code", 2),
            FieldSegment("authority_code", 3),
            FieldSegment("number", 9),
            CheckDigitSegment("number", ((5, 14),)),
            FieldSegment("optional_data", 15),
        ),
        (
            FieldSegment("birth_date", 6),
            CheckDigitSegment("birth_date", ((30, 36),)),
            FieldSegment("gender_marker", 1),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((38, 44),)),
            FieldSegment("nationality_code", 3),
            FieldSegment("optional_data", 11, offset=15),
            CheckDigitSegment("composite", ((5, 30), (30, 37), (38, 45), (48, 59))),
        ),
        (FieldSegment("full_name", 30),),
    ),
)

# Part 6: TD2 size documents, 2 lines of 36
TD2 = MRZLayout(
    "TD2",
    36,
    (
        (
            FieldSegment("type_code", 2),
            FieldSegment("authority_code", 3),
            FieldSegment("full_name", 31),
        ),
        (
            FieldSegment("number", 9),
            CheckDigitSegment("number", ((36, 45),)),
            FieldSegment("nationality_code", 3),
            FieldSegment("birth_date", 6),
            CheckDigitSegment("birth_date", ((49, 55),)),
            FieldSegment("gender_marker", 1),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((57, 63),)),
            FieldSegment("optional_data", 7),
            CheckDigitSegment("composite", ((36, 46), (49, 56), (57, 71))),
        ),
    ),
)

# Part 4: TD3 size documents (passports), 2 lines of 44
TD3 = MRZLayout(
    "TD3",
    44,
    (
        (
            FieldSegment("type_code", 2),
            FieldSegment("authority_code", 3),
            FieldSegment("full_name", 39),
        ),
        (
            FieldSegment("number", 9),
            CheckDigitSegment("number", ((44, 53),)),
            FieldSegment("nationality_code", 3),
            FieldSegment("birth_date", 6),
            CheckDigitSegment("birth_date", ((57, 63),)),
            FieldSegment("gender_marker", 1),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((65, 71),)),
            FieldSegment("optional_data", 14),
            CheckDigitSegment("optional_data", ((72, 86),), blank_when_empty=True),
            CheckDigitSegment("composite", ((44, 54), (57, 64), (65, 87))),
        ),
    ),
)

# Part 7: machine readable visas. The expiration field holds "valid until".
MRVA = MRZLayout(
    "MRV-A",
    44,
    (
        (
            FieldSegment("type_code", 2),
            FieldSegment("authority_code", 3),
            FieldSegment("full_name", 39),
        ),
        (
            FieldSegment("number", 9),
            CheckDigitSegment("number", ((44, 53),)),
            FieldSegment("nationality_code", 3),
            FieldSegment("birth_date", 6),
            CheckDigitSegment("birth_date", ((57, 63),)),
            FieldSegment("gender_marker", 1),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((65, 71),)),
            FieldSegment("optional_data", 16),
        ),
    ),
)

MRVB = MRZLayout(
    "MRV-B",
    36,
    (
        (
            FieldSegment("type_code", 2),
            FieldSegment("authority_code", 3),
            FieldSegment("full_name", 31),
        ),
        (
            FieldSegment("number", 9),
            CheckDigitSegment("number", ((36, 45),)),
            FieldSegment("nationality_code", 3),
            FieldSegment("birth_date", 6),
            CheckDigitSegment("birth_date", ((49, 55),)),
            FieldSegment("gender_marker", 1),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((57, 63),)),
            FieldSegment("optional_data", 8),
        ),
    ),
)

# Crew ID badges: TD1 without date of birth, sex or nationality
CREW_ID = MRZLayout(
    "Crew ID",
    30,
    (
        TD1.lines[0],
        (
            FillerSegment("<<<<<<0<"),
            FieldSegment("expiration_date", 6),
            CheckDigitSegment("expiration_date", ((38, 44),)),
            FillerSegment("XXX"),
            FieldSegment("optional_data", 11, offset=15),
            CheckDigitSegment("composite", ((5, 30), (30, 37), (38, 45), (48, 59))),
        ),
        TD1.lines[2],
    ),
)
