"""Well-known identities used across registry tests."""

ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
OFFICIAL = "ST2CY5V39NHDP5P0TP2KS8AMGE0MC0H7ADD0T0GVK"
VOTER_A = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
VOTER_B = "ST2NEB84ASENDXKYGJPQW86YXQCEFEX2ZQPG87ND"
VOTER_C = "ST2REHHS5J3CERCRBEPMGH7921Q6PYKAADT7JP2VB"
STRANGER = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"

INITIAL_HEIGHT = 100
