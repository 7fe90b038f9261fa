"""
Names under which licenses are commonly declared in package metadata and scanner
output, mapped to the SPDX license ids they stand for.

Keys are lower case and must lex as a single license identifier. An alias that
stands for a choice between several licenses lists all of them, in the order
they are offered.
"""

from __future__ import annotations

ALIASES: dict[str, tuple[str, ...]] = {
    # Apache
    "apache": ("Apache-2.0",),
    "apache-2": ("Apache-2.0",),
    "apache-license-2.0": ("Apache-2.0",),
    "apache2": ("Apache-2.0",),
    "apache2.0": ("Apache-2.0",),
    "asl-2.0": ("Apache-2.0",),
    "asl2": ("Apache-2.0",),
    # BSD
    "bsd-2": ("BSD-2-Clause",),
    "bsd-3": ("BSD-3-Clause",),
    "bsd-new": ("BSD-3-Clause",),
    "bsd-simplified": ("BSD-2-Clause",),
    "freebsd": ("BSD-2-Clause",),
    "modified-bsd": ("BSD-3-Clause",),
    "new-bsd": ("BSD-3-Clause",),
    "revised-bsd": ("BSD-3-Clause",),
    "simplified-bsd": ("BSD-2-Clause",),
    # GNU
    "agpl3": ("AGPL-3.0-only",),
    "agplv3": ("AGPL-3.0-only",),
    "agpl-3.0-plus": ("AGPL-3.0-or-later",),
    "gpl-2": ("GPL-2.0-only",),
    "gpl-2.0-plus": ("GPL-2.0-or-later",),
    "gpl-3": ("GPL-3.0-only",),
    "gpl-3.0-plus": ("GPL-3.0-or-later",),
    "gpl2": ("GPL-2.0-only",),
    "gpl3": ("GPL-3.0-only",),
    "gplv2": ("GPL-2.0-only",),
    "gplv3": ("GPL-3.0-only",),
    "lgpl-2.1-plus": ("LGPL-2.1-or-later",),
    "lgpl-3.0-plus": ("LGPL-3.0-or-later",),
    "lgpl2.1": ("LGPL-2.1-only",),
    "lgpl3": ("LGPL-3.0-only",),
    "lgplv2.1": ("LGPL-2.1-only",),
    "lgplv3": ("LGPL-3.0-only",),
    # Others
    "boost": ("BSL-1.0",),
    "cc0": ("CC0-1.0",),
    "cddl": ("CDDL-1.0",),
    "epl": ("EPL-1.0",),
    "epl2": ("EPL-2.0",),
    "eupl": ("EUPL-1.2",),
    "expat": ("MIT",),
    "isc-license": ("ISC",),
    "mit-license": ("MIT",),
    "mpl": ("MPL-2.0",),
    "mpl-2": ("MPL-2.0",),
    "mpl2": ("MPL-2.0",),
    "psf": ("PSF-2.0",),
    "python": ("Python-2.0",),
    "zlib-license": ("Zlib",),
    # Choices between several licenses
    "dual-bsd-gpl": ("BSD-3-Clause", "GPL-2.0-only"),
    "dual-mit-gpl": ("MIT", "GPL-2.0-only"),
    "mpl-tri-license": ("MPL-1.1", "GPL-2.0-or-later", "LGPL-2.1-or-later"),
    "perl": ("Artistic-1.0-Perl", "GPL-1.0-or-later"),
    "perl-5": ("Artistic-1.0-Perl", "GPL-1.0-or-later"),
}
