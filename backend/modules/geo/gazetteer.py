"""
modules/geo/gazetteer.py
------------------------
Fallback gazetteer: curated Indian destinations → (lat, lng).

Consulted only when live geocoding returns nothing. Keys are lowercase and
trimmed; lookups are exact-match (no fuzzy matching). The regional grouping
below is for maintenance only and carries no runtime meaning.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from schemas.recommendation import Coordinates

_ENTRIES: dict[str, tuple[float, float]] = {
    # ── Sikkim ────────────────────────────────────────────────────────────────
    "gangtok":       (27.3389, 88.6065),
    "pelling":       (27.3000, 88.2333),
    "lachung":       (27.6909, 88.7463),
    "namchi":        (27.1672, 88.3636),
    "ravangla":      (27.3032, 88.3636),
    "yuksom":        (27.3745, 88.2123),
    "yumthang":      (27.8258, 88.6980),
    "lachen":        (27.7300, 88.5600),
    "jheel":         (27.3893, 88.2486),

    # ── West Bengal (hills) ───────────────────────────────────────────────────
    "darjeeling":    (27.0410, 88.2663),
    "kalimpong":     (27.0644, 88.4736),
    "mirik":         (26.8867, 88.1844),
    "siliguri":      (26.7271, 88.3953),
    "kurseong":      (26.8832, 88.2779),

    # ── Meghalaya ─────────────────────────────────────────────────────────────
    "shillong":      (25.5788, 91.8933),
    "cherrapunjee":  (25.2799, 91.7263),
    "mawlynnong":    (25.2031, 91.9182),
    "dawki":         (25.1856, 92.0165),
    "mawsynram":     (25.3069, 91.5831),
    "nongriat":      (25.2484, 91.7124),

    # ── Uttarakhand ───────────────────────────────────────────────────────────
    "nainital":      (29.3919, 79.4542),
    "mussoorie":     (30.4598, 78.0644),
    "rishikesh":     (30.0869, 78.2676),
    "haridwar":      (29.9457, 78.1642),
    "dehradun":      (30.3165, 78.0322),
    "auli":          (30.5303, 79.5677),
    "jim corbett":   (29.5300, 78.7747),
    "badrinath":     (30.7433, 79.4938),
    "kedarnath":     (30.7346, 79.0669),

    # ── Himachal Pradesh ──────────────────────────────────────────────────────
    "dalhousie":     (32.5387, 75.9701),
    "khajjiar":      (32.5453, 76.0638),
    "manali":        (32.2432, 77.1892),
    "shimla":        (31.1048, 77.1734),
    "kullu":         (31.9592, 77.1089),
    "dharamshala":   (32.2190, 76.3234),
    "mcleodganj":    (32.2427, 76.3233),
    "kasol":         (32.0100, 77.3152),
    "spiti":         (32.2464, 78.0349),
    "kufri":         (31.0978, 77.2696),
    "chail":         (30.9677, 77.1907),

    # ── Odisha ────────────────────────────────────────────────────────────────
    "puri":          (19.8133, 85.8314),
    "konark":        (19.8876, 86.0945),
    "gopalpur":      (19.2583, 84.9070),
    "chandipur":     (21.4669, 87.0193),
    "bhubaneswar":   (20.2961, 85.8245),
    "chilika lake":  (19.7158, 85.3311),

    # ── West Bengal (coast & plains) ──────────────────────────────────────────
    "digha":         (21.6238, 87.5059),
    "mandarmani":    (21.6735, 87.6729),
    "tajpur":        (21.6077, 87.5677),
    "kolkata":       (22.5726, 88.3639),
    "sundarbans":    (21.9497, 88.8107),
    "santiniketan":  (23.6773, 87.6838),

    # ── Andhra Pradesh ────────────────────────────────────────────────────────
    "visakhapatnam": (17.6868, 83.2185),
    "vizag":         (17.6868, 83.2185),
    "araku":         (18.3273, 82.8695),
    "araku valley":  (18.3273, 82.8695),
    "tirupati":      (13.6288, 79.4192),
    "vijayawada":    (16.5062, 80.6480),

    # ── Tamil Nadu ────────────────────────────────────────────────────────────
    "mahabalipuram": (12.6269, 80.1928),
    "pondicherry":   (11.9416, 79.8083),
    "ooty":          (11.4102, 76.6950),
    "kodaikanal":    (10.2381, 77.4892),
    "chennai":       (13.0827, 80.2707),
    "madurai":       (9.9252, 78.1198),
    "rameshwaram":   (9.2876, 79.3129),
    "kanyakumari":   (8.0883, 77.5385),

    # ── Kerala ────────────────────────────────────────────────────────────────
    "kovalam":       (8.3988, 76.9781),
    "alleppey":      (9.4981, 76.3388),
    "alappuzha":     (9.4981, 76.3388),
    "munnar":        (10.0889, 77.0595),
    "wayanad":       (11.6854, 76.1320),
    "kochi":         (9.9312, 76.2673),
    "thekkady":      (9.5835, 77.1830),
    "varkala":       (8.7378, 76.7163),
    "kumarakom":     (9.6144, 76.4254),

    # ── Goa ───────────────────────────────────────────────────────────────────
    "goa":           (15.2993, 73.9322),
    "panjim":        (15.4909, 73.8278),
    "calangute":     (15.5440, 73.7527),
    "baga":          (15.5553, 73.7540),
    "anjuna":        (15.5746, 73.7419),
    "palolem":       (15.0100, 74.0232),

    # ── Rajasthan ─────────────────────────────────────────────────────────────
    "jaipur":        (26.9124, 75.7873),
    "udaipur":       (24.5854, 73.7125),
    "jodhpur":       (26.2389, 73.0243),
    "jaisalmer":     (26.9157, 70.9083),
    "pushkar":       (26.4872, 74.5542),
    "mount abu":     (24.5926, 72.7156),
    "bikaner":       (28.0229, 73.3119),

    # ── Gujarat ───────────────────────────────────────────────────────────────
    "ahmedabad":     (23.0225, 72.5714),
    "kutch":         (23.7337, 69.8597),
    "dwarka":        (22.2442, 68.9685),
    "somnath":       (20.8880, 70.4010),
    "gir":           (21.1390, 70.8236),
    "rann of kutch": (23.8348, 69.5371),

    # ── Major cities ──────────────────────────────────────────────────────────
    "mumbai":        (19.0760, 72.8777),
    "delhi":         (28.6139, 77.2090),
    "bangalore":     (12.9716, 77.5946),
    "bengaluru":     (12.9716, 77.5946),
    "hyderabad":     (17.3850, 78.4867),
    "agra":          (27.1767, 78.0081),
    "varanasi":      (25.3176, 82.9739),
    "amritsar":      (31.6340, 74.8723),
    "lucknow":       (26.8467, 80.9462),
    "srinagar":      (34.0837, 74.7973),
    "leh":           (34.1526, 77.5771),
    "ladakh":        (34.1526, 77.5771),
}

# Built once at import; read-only for the life of the process.
FALLBACK_COORDINATES: Mapping[str, Coordinates] = MappingProxyType(
    {name: Coordinates(lat, lng) for name, (lat, lng) in _ENTRIES.items()}
)


def normalize_key(name: str) -> str:
    return name.strip().lower()


def lookup(name: str) -> Optional[Coordinates]:
    """Exact-match lookup on the lowercased, trimmed name."""
    return FALLBACK_COORDINATES.get(normalize_key(name))
