"""The first two self-play games used by the timed benchmark."""

from __future__ import annotations

# Each line: halfmove clock, then the ten board ranks from the top down.
_GAME_1_ROWS = """
1 2bakab2 9 c3c1n2 p3p1p1p 1npr5 2P2NP2 P3P3P 2CCB4 4A4 1NBAKR3
0 2bakab2 9 c3c1n2 p3p1p1p 1nC1r4 2P2NP2 P3P3P 3CB4 4A4 1NBAKR3
2 2bakab2 9 c2c2n2 p3p1p1p 1nC1r4 2P2NP2 P3P3P 2NCB4 4A4 2BAKR3
4 2baka3 9 c2cb1n2 p1C1p1p1p 1n2r4 2P2NP2 P3P3P 2NCB4 4A4 2BAKR3
0 2baka3 9 2ccb1n2 p1C1p1N1p 1n2r4 2P3P2 P3P3P 2NCB4 4A4 2BAKR3
2 2baka3 9 2ccb1n2 p1C1p1N1p 1n5r1 1NP3P2 P3P3P 3CB4 4A4 2BAKR3
4 2baka3 9 1c1cb1n2 pC2p1N1p 1n5r1 1NP3P2 P3P3P 3CB4 4A4 2BAKR3
6 2bak4 4a4 1c1cb1n2 pC2p1N1p 1n5r1 PNP3P2 4P3P 3CB4 4A4 2BAKR3
8 2bak4 4a4 1c2b1n2 pC2p1N1p 1n5r1 P1Pc2P2 4P3P N2CB4 4A4 2BAKR3
10 2bak4 4a4 1c2b1n2 pC1cp1N1p 1n5r1 P1P2RP2 4P3P N2CB4 4A4 2BAK4
12 2bak4 4a4 2c1b1n2 pC1cp1N1p 1n5r1 P1P2RP2 4P3P N2CB4 9 2BAKA3
14 2bak4 2c1a4 4b1n2 pC1cp1N1p 1n5r1 P1P2RP2 4P3P N2CB4 4A4 2B1KA3
16 2bak4 2c1a4 4b1n2 pCc1p1N1p 1n5r1 P1P2RP1P 4P4 N2CB4 4A4 2B1KA3
18 2bak4 1c2a4 4b1n2 pCc1p1N1p 1n5r1 P1P2RP1P 4P4 N3B4 3CA4 2B1KA3
20 2bak4 1c2a4 4b1n2 pCc1p1N1p 1n1r5 P1P2RP1P 4P4 N2AB4 3C5 2B1KA3
1 2bak4 1c2a4 4b1n2 pCc1p1N1p 1n7 P1P2RP1P 4P4 N2rB4 6C2 2B1KA3
0 2bak4 1c2a4 4N1n2 pCc1p3p 9 P1P2RP1P n3P4 N2rB4 6C2 2B1KA3
0 3ak4 1c2a4 4b1C2 pCc1p3p 9 P1P2RP1P n3P4 N2rB4 9 2B1KA3
2 3ak4 1c2a4 4b1C2 p1c1p3p 9 PCP2RP1P n3P4 N3B4 3r5 2B1KA3
4 3ak4 1c2a4 4b1C2 p1c1p3p 9 PCP2RP1P 4P4 N1n1B4 3rA4 2B1K4
1 3ak4 1c2a4 4b1C2 p1c1p3p 9 PCP2RP1P 4P4 N1n1B4 4r4 2B2K3
3 3ak4 1c2a4 4b1C2 p1c1p3p 2P6 PC3RP1P 4P4 N1n1B4 3r5 2B2K3
5 3ak4 1c2a4 4b1C2 p1c1p3p 2P6 PC3RP1P 4P4 N1n1B4 5K3 2Br5
0 3ak4 1c7 4bRC2 p1c1p3p 2P6 PC4P1P 4P4 N1n1B4 5K3 2Br5
2 3ak4 1c7 4bRC2 p1c1p3p 2P6 PC4P1P 4P4 N1n1B4 3r5 2B2K3
4 4k4 1c2a4 4b1C2 p1c1p3p 2P6 PC3RP1P 4P4 N1n1B4 3r5 2B2K3
6 2c1k4 1c2a4 4b1C2 p1P1p3p 9 PC3RP1P 4P4 N1n1B4 3r5 2B2K3
8 2c1k4 1c2a4 4b1C2 p1P1p3p 9 P4RP1P 4P4 N3B4 n2r5 1CB2K3
1 4k4 1c2a4 4b1C2 p1P1p3p 9 P1R3P1P 4P4 N3B4 n2r5 1Cc2K3
3 4k4 1c2a4 4b1C2 p1P1p3p 9 P1R3P1P 4P4 N3B4 n4K3 1Ccr5
1 4k4 1c2a4 4b1C2 p1c1p3p 9 P5P1P 4P4 N3B4 n1R2K3 1C1r5
0 4k4 1c2a4 4b1C2 p1c1p3p 9 P5P1P 4P4 N3B4 R4K3 1r7
2 4k4 1c2a4 4b1C2 p1c1p3p 6P2 P7P 4P4 Nr2B4 R4K3 9
4 4k4 1c2a4 4b1C2 p3p3p 2c2P3 P7P 4P4 Nr2B4 R4K3 9
1 4k4 1c2a4 4b1C2 p3p3p 2c2P3 P7P 4P4 N3r4 1R3K3 9
3 4k4 4a4 4b1C2 p3p3p 2c2P3 P7P 4P4 Nc2r4 5K3 1R7
5 4k4 4a4 4b1C2 p3p3p 2c3P2 P7P 4P4 Nc4r2 5K3 1R7
7 4k4 4a4 4b1C2 p3p3p 2c2P3 P7P 4P4 Nc6r 5K3 1R7
9 4k4 4a4 4b1C2 p3p3p 2c2P3 P7P 4P4 Nc3K3 8r 1R7
11 4k4 4a4 4b2C1 p3p3p 2c2P3 P7P 4P4 Nc3K3 6r2 1R7
13 4k4 4a4 4b1C2 p3p3p 2c2P3 P7P 4P4 Nc3K3 7r1 1R7
15 4k4 4a4 4b1C2 p3p3p 2c2P1r1 P7P 4P4 Nc2K4 9 1R7
1 4k4 4a4 4b1C2 p3p3p 2c2r3 P3P3P 9 Nc2K4 9 1R7
3 4k4 4a4 4b3C p3p3p 2c3r2 P3P3P 9 Nc2K4 9 1R7
5 4k4 4a4 4b3C p3p3p 6r2 P3P3P 9 Nc7 2c1K4 1R7
7 4k4 4a4 4b3C p3p3p 6r2 P3P3P 9 Nc7 1c2K4 7R1
9 4k4 4a4 4b3C p3p3p 6r2 P3P3P 9 Nc7 c3K4 R8
0 4k4 4a4 4b3C p7p 4P1r2 P7P 9 Nc7 c3K4 R8
1 4k4 4a4 4b3C p7p 4r4 P7P 9 Nc7 c2K5 R8
3 4k4 9 4ba2C p7p 4r4 PN6P 9 1c7 c2K5 R8
5 4k4 9 5a1C1 p7p 4r1b2 PN6P 9 1c7 c2K5 R8
7 4k4 9 5a1C1 p7p 6b2 PN6P 9 1c1K5 c3r4 R8
9 4k4 9 5a3 p7p 6b2 PN2r3P 7C1 1c1K5 c8 R8
1 4k4 9 5a3 p7p 6b2 Pr6P 7C1 1c1K5 c8 4R4
3 4k4 4a4 9 p7p 6b2 Pr6P 4C4 1c1K5 c8 4R4
5 4k4 9 3a5 p7p 6b2 Pr6P 3C5 1c1K5 c8 4R4
7 5k3 9 3a5 p7p 6b2 Pr6P 3C5 1c1K5 c3R4 9
"""

_GAME_2_ROWS = """
0 r1bakr3 4a4 2ncb1n2 2p1p1p1p p8 2PN5 P3P1P1P C3B4 6Cc1 1RBAKA1NR
1 r1bakr3 4a4 2ncb1n2 2N1p3p p5p2 2P6 P3P1P1P C3B4 6Cc1 1RBAKA1NR
3 r1bakr3 4a4 2ncb1n2 2N1p2cp p5p2 2P6 P3P1P1P C3B4 2C6 1RBAKA1NR
1 r1bakr3 4a4 3cN1n2 4p2cp p2n2p2 2P6 P3P1P1P C3B4 2C6 1RBAKA1NR
0 r2akr3 4a4 3cb1n2 4p2cp pR1n2p2 2P6 P3P1P1P C3B4 2C6 2BAKA1NR
1 1r1akr3 4a4 3cb1n2 4p2cp p2R2p2 2P6 P3P1P1P C3B4 2C6 2BAKA1NR
3 1r1akr3 4a4 3cb1n2 4p3p p2R2pc1 2P6 P3P1P1P C3B1N2 2C6 2BAKA2R
5 1r1ak4 4a4 3cb1n2 4p3p p5pc1 2PR5 P3P1P1P C3B1N2 2C2r3 2BAKA2R
7 1r1ak4 4a4 3cb1n2 4p3p p4rpc1 2PR5 P3P1P1P C3B1N2 2C1A4 2BAK3R
0 1r1ak4 4a4 3cb1n2 4p3p p1r3pc1 3R5 P3P1P1P C3B1N2 2C1A4 2BAK3R
2 1r1ak4 4a4 3cb4 4p3p p1r2npc1 2CR5 P3P1P1P C3B1N2 4A4 2BAK3R
4 1r1ak4 4a4 3cb2c1 4p3p p1r2np2 2C4R1 P3P1P1P C3B1N2 4A4 2BAK3R
0 1r1ak4 4a4 3cb2c1 4p3p p1r2n3 2C3pR1 P3P3P C3B1N2 4A4 2BAK3R
1 1r1aka3 9 3cb2c1 4p3p p1r2n3 2C3R2 P3P3P C3B1N2 4A4 2BAK3R
3 1r1aka3 9 2c1b2c1 4p3p p1r2n3 2C3R2 P3P3P C3B1N2 4A4 2BAK2R1
5 1r1aka3 9 2c1b2c1 4p3p p3rn3 2C3R2 P3P3P 2C1B1N2 4A4 2BAK2R1
7 1r1aka3 9 2c1b2c1 4p3p p2r1n3 2C1P1R2 P7P 2C1B1N2 4A4 2BAK2R1
9 1r2ka3 4a4 2c1b2c1 4p3p p2r1n3 2C1P1R2 P7P 3CB1N2 4A4 2BAK2R1
11 4ka3 4a4 2c1b2c1 4p3p pr1r1n1R1 2C1P1R2 P7P 3CB1N2 4A4 2BAK4
13 4ka3 4a4 2c1b2c1 4p1R1p pr3n1R1 2CrP4 P7P 3CB1N2 4A4 2BAK4
0 4ka3 4a4 2c1b2c1 4R3p pr3n1R1 2r1P4 P7P 3CB1N2 4A4 2BAK4
0 4ka3 4a4 2c1b2c1 8p p3rn1R1 2r1P4 P7P 3CB1N2 4A4 2BAK4
1 4ka3 4a4 2c1b2c1 8p p3P2R1 2r6 P5n1P 3CB1N2 4A4 2BAK4
0 4ka3 4a4 4b2c1 8p p3P4 2r6 P5n1P 3CB1N2 4A4 2BAK4
1 4ka3 4a4 4b4 8p p3P4 2B6 P5ncP 3C2N2 4A4 2BAK4
0 4ka3 4a4 4b4 8p p3P4 2B6 c5n1P C5N2 4A4 2BAK4
1 4kab2 4a4 9 8p C3P4 2B6 c5n1P 6N2 4A4 2BAK4
3 4kab2 4a4 9 8p C3P4 2B6 c3N3P 8n 4A4 2BAK4
5 4kab2 4a4 9 8p C3P4 2B3N2 c7P 9 4A1n2 2BAK4
7 3k1ab2 4a4 9 8p C3P4 2B3N2 c7P 9 4A1n2 2BA1K3
9 3k1ab2 4a4 9 8p 3CP4 2B3N2 c6nP 9 4A4 2BA1K3
11 3k1ab2 c3a4 9 8p 4P4 2B3N2 3C3nP 9 4A4 2BA1K3
13 3k1a3 c3a4 4b4 8p 4P4 2B3N2 6CnP 9 4A4 2BA1K3
15 3k1a3 c3a4 9 7Np 4P1b2 2B6 6CnP 9 4A4 2BA1K3
17 3k1a3 4a4 9 7Np 4P1b2 2B6 6CnP 4B4 4A4 c2A1K3
19 3k1a3 4a4 c8 7Np 4P1b2 2B6 6CnP 4B4 4AK3 3A5
21 3k1a3 4a4 5c3 7Np 4P1b2 2B6 6CnP 4BA3 5K3 3A5
23 3k1a3 4a4 9 7Np 4P1b2 2B6 5cCnP 4BA3 4K4 3A5
25 3k1a3 4a4 9 7N1 4P1b1p 2B6 5cCnP 5A3 4K4 3A2B2
27 3k1a3 9 3a5 7N1 4P1b1p 2B6 5cCnP 5A2B 4K4 3A5
29 3k1a3 4a4 9 7N1 5Pb1p 2B6 5cCnP 5A2B 4K4 3A5
31 3k1a3 4a4 8b 9 5P2p 2B3N2 5cCnP 5A2B 4K4 3A5
33 3k1a3 4a4 8b 9 4NP2p 2B6 4c1CnP 5A2B 4K4 3A5
35 3k1a3 4a4 8b 2N6 5P2p 2B6 4c1C1P 5A2B 4K1n2 3A5
37 4ka3 1N2a4 8b 9 5P2p 2B6 4c1C1P 5A2B 4K1n2 3A5
39 4ka3 1N7 5aC1b 9 5P2p 2B6 4c3P 5A2B 4K1n2 3A5
41 4k4 1N2a4 5a2b 6C2 5P2p 2B6 4c3P 5A2B 4K1n2 3A5
0 4k4 1N2a4 5a2b 6C2 6P1p 2B6 4c3P 5A2n 4K4 3A5
2 5k3 1N2a4 5a2b 4C4 6P1p 2B6 4c3P 5A2n 4K4 3A5
4 5k3 1N2a4 5a2b 4C4 7Pp 2B6 4c1n1P 5A3 4K4 3A5
1 5k3 1N2a4 5a3 4C4 6b1P 2B6 4c1n1P 5A3 4K4 3A5
3 5k3 1N2a4 5a3 8C 4c1b1P 2B6 6n1P 5A3 4K4 3A5
"""


def _expand(rows: str, side: str) -> tuple[str, ...]:
    """Turn compact rows into full FEN strings, numbering moves from 1."""
    lines = (line.split() for line in rows.strip().splitlines())
    return tuple(
        f"{'/'.join(ranks)} {side} - - {halfmove} {number}"
        for number, (halfmove, *ranks) in enumerate(lines, start=1)
    )


_GAMES = (_expand(_GAME_1_ROWS, "b"), _expand(_GAME_2_ROWS, "w"))


def games_a() -> tuple[tuple[str, ...], ...]:
    """Return the first two benchmark games, each a sequence of FEN positions."""
    return _GAMES