
from __future__ import annotations

from typing import TypedDict

class SPDXLicense(TypedDict):
    id: str
    name: str
    deprecated: bool
    or_later: bool

class SPDXException(TypedDict):
    id: str
    deprecated: bool


# A curated subset of the SPDX license list; `nox -s update_licenses` replaces
# it with the complete list of the latest release.
VERSION = '3.24-subset'

LICENSES: dict[str, SPDXLicense] = {
    '0bsd': {'id': '0BSD', 'name': 'BSD Zero Clause License', 'deprecated': False, 'or_later': False},
    'aal': {'id': 'AAL', 'name': 'Attribution Assurance License', 'deprecated': False, 'or_later': False},
    'afl-1.1': {'id': 'AFL-1.1', 'name': 'Academic Free License v1.1', 'deprecated': False, 'or_later': True},
    'afl-1.2': {'id': 'AFL-1.2', 'name': 'Academic Free License v1.2', 'deprecated': False, 'or_later': True},
    'afl-2.0': {'id': 'AFL-2.0', 'name': 'Academic Free License v2.0', 'deprecated': False, 'or_later': True},
    'afl-2.1': {'id': 'AFL-2.1', 'name': 'Academic Free License v2.1', 'deprecated': False, 'or_later': True},
    'afl-3.0': {'id': 'AFL-3.0', 'name': 'Academic Free License v3.0', 'deprecated': False, 'or_later': True},
    'agpl-1.0': {'id': 'AGPL-1.0', 'name': 'Affero General Public License v1.0', 'deprecated': True, 'or_later': True},
    'agpl-1.0-only': {'id': 'AGPL-1.0-only', 'name': 'Affero General Public License v1.0 only', 'deprecated': False, 'or_later': False},
    'agpl-1.0-or-later': {'id': 'AGPL-1.0-or-later', 'name': 'Affero General Public License v1.0 or later', 'deprecated': False, 'or_later': False},
    'agpl-3.0': {'id': 'AGPL-3.0', 'name': 'GNU Affero General Public License v3.0', 'deprecated': True, 'or_later': True},
    'agpl-3.0-only': {'id': 'AGPL-3.0-only', 'name': 'GNU Affero General Public License v3.0 only', 'deprecated': False, 'or_later': False},
    'agpl-3.0-or-later': {'id': 'AGPL-3.0-or-later', 'name': 'GNU Affero General Public License v3.0 or later', 'deprecated': False, 'or_later': False},
    'apache-1.0': {'id': 'Apache-1.0', 'name': 'Apache License 1.0', 'deprecated': False, 'or_later': True},
    'apache-1.1': {'id': 'Apache-1.1', 'name': 'Apache License 1.1', 'deprecated': False, 'or_later': True},
    'apache-2.0': {'id': 'Apache-2.0', 'name': 'Apache License 2.0', 'deprecated': False, 'or_later': True},
    'apsl-1.0': {'id': 'APSL-1.0', 'name': 'Apple Public Source License 1.0', 'deprecated': False, 'or_later': True},
    'apsl-1.1': {'id': 'APSL-1.1', 'name': 'Apple Public Source License 1.1', 'deprecated': False, 'or_later': True},
    'apsl-1.2': {'id': 'APSL-1.2', 'name': 'Apple Public Source License 1.2', 'deprecated': False, 'or_later': True},
    'apsl-2.0': {'id': 'APSL-2.0', 'name': 'Apple Public Source License 2.0', 'deprecated': False, 'or_later': True},
    'artistic-1.0': {'id': 'Artistic-1.0', 'name': 'Artistic License 1.0', 'deprecated': False, 'or_later': True},
    'artistic-1.0-cl8': {'id': 'Artistic-1.0-cl8', 'name': 'Artistic License 1.0 w/clause 8', 'deprecated': False, 'or_later': False},
    'artistic-1.0-perl': {'id': 'Artistic-1.0-Perl', 'name': 'Artistic License 1.0 (Perl)', 'deprecated': False, 'or_later': False},
    'artistic-2.0': {'id': 'Artistic-2.0', 'name': 'Artistic License 2.0', 'deprecated': False, 'or_later': True},
    'beerware': {'id': 'Beerware', 'name': 'Beerware License', 'deprecated': False, 'or_later': False},
    'bittorrent-1.0': {'id': 'BitTorrent-1.0', 'name': 'BitTorrent Open Source License v1.0', 'deprecated': False, 'or_later': True},
    'bittorrent-1.1': {'id': 'BitTorrent-1.1', 'name': 'BitTorrent Open Source License v1.1', 'deprecated': False, 'or_later': True},
    'blessing': {'id': 'blessing', 'name': 'SQLite Blessing', 'deprecated': False, 'or_later': False},
    'blueoak-1.0.0': {'id': 'BlueOak-1.0.0', 'name': 'Blue Oak Model License 1.0.0', 'deprecated': False, 'or_later': True},
    'bsd-1-clause': {'id': 'BSD-1-Clause', 'name': 'BSD 1-Clause License', 'deprecated': False, 'or_later': False},
    'bsd-2-clause': {'id': 'BSD-2-Clause', 'name': 'BSD 2-Clause "Simplified" License', 'deprecated': False, 'or_later': False},
    'bsd-2-clause-freebsd': {'id': 'BSD-2-Clause-FreeBSD', 'name': 'BSD 2-Clause FreeBSD License', 'deprecated': True, 'or_later': False},
    'bsd-2-clause-netbsd': {'id': 'BSD-2-Clause-NetBSD', 'name': 'BSD 2-Clause NetBSD License', 'deprecated': True, 'or_later': False},
    'bsd-2-clause-patent': {'id': 'BSD-2-Clause-Patent', 'name': 'BSD-2-Clause Plus Patent License', 'deprecated': False, 'or_later': False},
    'bsd-3-clause': {'id': 'BSD-3-Clause', 'name': 'BSD 3-Clause "New" or "Revised" License', 'deprecated': False, 'or_later': False},
    'bsd-3-clause-attribution': {'id': 'BSD-3-Clause-Attribution', 'name': 'BSD with attribution', 'deprecated': False, 'or_later': False},
    'bsd-3-clause-clear': {'id': 'BSD-3-Clause-Clear', 'name': 'BSD 3-Clause Clear License', 'deprecated': False, 'or_later': False},
    'bsd-3-clause-lbnl': {'id': 'BSD-3-Clause-LBNL', 'name': 'Lawrence Berkeley National Labs BSD variant license', 'deprecated': False, 'or_later': False},
    'bsd-3-clause-no-nuclear-license': {'id': 'BSD-3-Clause-No-Nuclear-License', 'name': 'BSD 3-Clause No Nuclear License', 'deprecated': False, 'or_later': False},
    'bsd-4-clause': {'id': 'BSD-4-Clause', 'name': 'BSD 4-Clause "Original" or "Old" License', 'deprecated': False, 'or_later': False},
    'bsd-4-clause-uc': {'id': 'BSD-4-Clause-UC', 'name': 'BSD-4-Clause (University of California-Specific)', 'deprecated': False, 'or_later': False},
    'bsd-source-code': {'id': 'BSD-Source-Code', 'name': 'BSD Source Code Attribution', 'deprecated': False, 'or_later': False},
    'bsl-1.0': {'id': 'BSL-1.0', 'name': 'Boost Software License 1.0', 'deprecated': False, 'or_later': True},
    'busl-1.1': {'id': 'BUSL-1.1', 'name': 'Business Source License 1.1', 'deprecated': False, 'or_later': True},
    'bzip2-1.0.5': {'id': 'bzip2-1.0.5', 'name': 'bzip2 and libbzip2 License v1.0.5', 'deprecated': True, 'or_later': True},
    'bzip2-1.0.6': {'id': 'bzip2-1.0.6', 'name': 'bzip2 and libbzip2 License v1.0.6', 'deprecated': False, 'or_later': True},
    'cal-1.0': {'id': 'CAL-1.0', 'name': 'Cryptographic Autonomy License 1.0', 'deprecated': False, 'or_later': True},
    'catosl-1.1': {'id': 'CATOSL-1.1', 'name': 'Computer Associates Trusted Open Source License 1.1', 'deprecated': False, 'or_later': True},
    'cc-by-1.0': {'id': 'CC-BY-1.0', 'name': 'Creative Commons Attribution 1.0 Generic', 'deprecated': False, 'or_later': True},
    'cc-by-2.0': {'id': 'CC-BY-2.0', 'name': 'Creative Commons Attribution 2.0 Generic', 'deprecated': False, 'or_later': True},
    'cc-by-2.5': {'id': 'CC-BY-2.5', 'name': 'Creative Commons Attribution 2.5 Generic', 'deprecated': False, 'or_later': True},
    'cc-by-3.0': {'id': 'CC-BY-3.0', 'name': 'Creative Commons Attribution 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-4.0': {'id': 'CC-BY-4.0', 'name': 'Creative Commons Attribution 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-by-nc-3.0': {'id': 'CC-BY-NC-3.0', 'name': 'Creative Commons Attribution Non Commercial 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-nc-4.0': {'id': 'CC-BY-NC-4.0', 'name': 'Creative Commons Attribution Non Commercial 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-by-nc-nd-3.0': {'id': 'CC-BY-NC-ND-3.0', 'name': 'Creative Commons Attribution Non Commercial No Derivatives 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-nc-nd-4.0': {'id': 'CC-BY-NC-ND-4.0', 'name': 'Creative Commons Attribution Non Commercial No Derivatives 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-by-nc-sa-3.0': {'id': 'CC-BY-NC-SA-3.0', 'name': 'Creative Commons Attribution Non Commercial Share Alike 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-nc-sa-4.0': {'id': 'CC-BY-NC-SA-4.0', 'name': 'Creative Commons Attribution Non Commercial Share Alike 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-by-nd-3.0': {'id': 'CC-BY-ND-3.0', 'name': 'Creative Commons Attribution No Derivatives 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-nd-4.0': {'id': 'CC-BY-ND-4.0', 'name': 'Creative Commons Attribution No Derivatives 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-by-sa-2.0': {'id': 'CC-BY-SA-2.0', 'name': 'Creative Commons Attribution Share Alike 2.0 Generic', 'deprecated': False, 'or_later': True},
    'cc-by-sa-2.5': {'id': 'CC-BY-SA-2.5', 'name': 'Creative Commons Attribution Share Alike 2.5 Generic', 'deprecated': False, 'or_later': True},
    'cc-by-sa-3.0': {'id': 'CC-BY-SA-3.0', 'name': 'Creative Commons Attribution Share Alike 3.0 Unported', 'deprecated': False, 'or_later': True},
    'cc-by-sa-4.0': {'id': 'CC-BY-SA-4.0', 'name': 'Creative Commons Attribution Share Alike 4.0 International', 'deprecated': False, 'or_later': True},
    'cc-pddc': {'id': 'CC-PDDC', 'name': 'Creative Commons Public Domain Dedication and Certification', 'deprecated': False, 'or_later': False},
    'cc0-1.0': {'id': 'CC0-1.0', 'name': 'Creative Commons Zero v1.0 Universal', 'deprecated': False, 'or_later': True},
    'cddl-1.0': {'id': 'CDDL-1.0', 'name': 'Common Development and Distribution License 1.0', 'deprecated': False, 'or_later': True},
    'cddl-1.1': {'id': 'CDDL-1.1', 'name': 'Common Development and Distribution License 1.1', 'deprecated': False, 'or_later': True},
    'cdla-permissive-1.0': {'id': 'CDLA-Permissive-1.0', 'name': 'Community Data License Agreement Permissive 1.0', 'deprecated': False, 'or_later': True},
    'cdla-permissive-2.0': {'id': 'CDLA-Permissive-2.0', 'name': 'Community Data License Agreement Permissive 2.0', 'deprecated': False, 'or_later': True},
    'cdla-sharing-1.0': {'id': 'CDLA-Sharing-1.0', 'name': 'Community Data License Agreement Sharing 1.0', 'deprecated': False, 'or_later': True},
    'cecill-2.0': {'id': 'CECILL-2.0', 'name': 'CeCILL Free Software License Agreement v2.0', 'deprecated': False, 'or_later': True},
    'cecill-2.1': {'id': 'CECILL-2.1', 'name': 'CeCILL Free Software License Agreement v2.1', 'deprecated': False, 'or_later': True},
    'cecill-b': {'id': 'CECILL-B', 'name': 'CeCILL-B Free Software License Agreement', 'deprecated': False, 'or_later': False},
    'cecill-c': {'id': 'CECILL-C', 'name': 'CeCILL-C Free Software License Agreement', 'deprecated': False, 'or_later': False},
    'clartistic': {'id': 'ClArtistic', 'name': 'Clarified Artistic License', 'deprecated': False, 'or_later': False},
    'cnri-python': {'id': 'CNRI-Python', 'name': 'CNRI Python License', 'deprecated': False, 'or_later': False},
    'cpal-1.0': {'id': 'CPAL-1.0', 'name': 'Common Public Attribution License 1.0', 'deprecated': False, 'or_later': True},
    'cpl-1.0': {'id': 'CPL-1.0', 'name': 'Common Public License 1.0', 'deprecated': False, 'or_later': True},
    'cua-opl-1.0': {'id': 'CUA-OPL-1.0', 'name': 'CUA Office Public License v1.0', 'deprecated': False, 'or_later': True},
    'curl': {'id': 'curl', 'name': 'curl License', 'deprecated': False, 'or_later': False},
    'ecl-1.0': {'id': 'ECL-1.0', 'name': 'Educational Community License v1.0', 'deprecated': False, 'or_later': True},
    'ecl-2.0': {'id': 'ECL-2.0', 'name': 'Educational Community License v2.0', 'deprecated': False, 'or_later': True},
    'ecos-2.0': {'id': 'eCos-2.0', 'name': 'eCos license version 2.0', 'deprecated': True, 'or_later': True},
    'efl-1.0': {'id': 'EFL-1.0', 'name': 'Eiffel Forum License v1.0', 'deprecated': False, 'or_later': True},
    'efl-2.0': {'id': 'EFL-2.0', 'name': 'Eiffel Forum License v2.0', 'deprecated': False, 'or_later': True},
    'entessa': {'id': 'Entessa', 'name': 'Entessa Public License v1.0', 'deprecated': False, 'or_later': False},
    'epl-1.0': {'id': 'EPL-1.0', 'name': 'Eclipse Public License 1.0', 'deprecated': False, 'or_later': True},
    'epl-2.0': {'id': 'EPL-2.0', 'name': 'Eclipse Public License 2.0', 'deprecated': False, 'or_later': True},
    'eudatagrid': {'id': 'EUDatagrid', 'name': 'EU DataGrid Software License', 'deprecated': False, 'or_later': False},
    'eupl-1.0': {'id': 'EUPL-1.0', 'name': 'European Union Public License 1.0', 'deprecated': False, 'or_later': True},
    'eupl-1.1': {'id': 'EUPL-1.1', 'name': 'European Union Public License 1.1', 'deprecated': False, 'or_later': True},
    'eupl-1.2': {'id': 'EUPL-1.2', 'name': 'European Union Public License 1.2', 'deprecated': False, 'or_later': True},
    'fair': {'id': 'Fair', 'name': 'Fair License', 'deprecated': False, 'or_later': False},
    'frameworx-1.0': {'id': 'Frameworx-1.0', 'name': 'Frameworx Open License 1.0', 'deprecated': False, 'or_later': True},
    'fsfap': {'id': 'FSFAP', 'name': 'FSF All Permissive License', 'deprecated': False, 'or_later': False},
    'ftl': {'id': 'FTL', 'name': 'Freetype Project License', 'deprecated': False, 'or_later': False},
    'gfdl-1.1-only': {'id': 'GFDL-1.1-only', 'name': 'GNU Free Documentation License v1.1 only', 'deprecated': False, 'or_later': False},
    'gfdl-1.1-or-later': {'id': 'GFDL-1.1-or-later', 'name': 'GNU Free Documentation License v1.1 or later', 'deprecated': False, 'or_later': False},
    'gfdl-1.2-only': {'id': 'GFDL-1.2-only', 'name': 'GNU Free Documentation License v1.2 only', 'deprecated': False, 'or_later': False},
    'gfdl-1.2-or-later': {'id': 'GFDL-1.2-or-later', 'name': 'GNU Free Documentation License v1.2 or later', 'deprecated': False, 'or_later': False},
    'gfdl-1.3-only': {'id': 'GFDL-1.3-only', 'name': 'GNU Free Documentation License v1.3 only', 'deprecated': False, 'or_later': False},
    'gfdl-1.3-or-later': {'id': 'GFDL-1.3-or-later', 'name': 'GNU Free Documentation License v1.3 or later', 'deprecated': False, 'or_later': False},
    'gpl-1.0': {'id': 'GPL-1.0', 'name': 'GNU General Public License v1.0 only', 'deprecated': True, 'or_later': True},
    'gpl-1.0+': {'id': 'GPL-1.0+', 'name': 'GNU General Public License v1.0 or later', 'deprecated': True, 'or_later': False},
    'gpl-1.0-only': {'id': 'GPL-1.0-only', 'name': 'GNU General Public License v1.0 only', 'deprecated': False, 'or_later': False},
    'gpl-1.0-or-later': {'id': 'GPL-1.0-or-later', 'name': 'GNU General Public License v1.0 or later', 'deprecated': False, 'or_later': False},
    'gpl-2.0': {'id': 'GPL-2.0', 'name': 'GNU General Public License v2.0 only', 'deprecated': True, 'or_later': True},
    'gpl-2.0+': {'id': 'GPL-2.0+', 'name': 'GNU General Public License v2.0 or later', 'deprecated': True, 'or_later': False},
    'gpl-2.0-only': {'id': 'GPL-2.0-only', 'name': 'GNU General Public License v2.0 only', 'deprecated': False, 'or_later': False},
    'gpl-2.0-or-later': {'id': 'GPL-2.0-or-later', 'name': 'GNU General Public License v2.0 or later', 'deprecated': False, 'or_later': False},
    'gpl-2.0-with-autoconf-exception': {'id': 'GPL-2.0-with-autoconf-exception', 'name': 'GNU General Public License v2.0 w/Autoconf exception', 'deprecated': True, 'or_later': False},
    'gpl-2.0-with-bison-exception': {'id': 'GPL-2.0-with-bison-exception', 'name': 'GNU General Public License v2.0 w/Bison exception', 'deprecated': True, 'or_later': False},
    'gpl-2.0-with-classpath-exception': {'id': 'GPL-2.0-with-classpath-exception', 'name': 'GNU General Public License v2.0 w/Classpath exception', 'deprecated': True, 'or_later': False},
    'gpl-2.0-with-font-exception': {'id': 'GPL-2.0-with-font-exception', 'name': 'GNU General Public License v2.0 w/Font exception', 'deprecated': True, 'or_later': False},
    'gpl-2.0-with-gcc-exception': {'id': 'GPL-2.0-with-GCC-exception', 'name': 'GNU General Public License v2.0 w/GCC Runtime Library exception', 'deprecated': True, 'or_later': False},
    'gpl-3.0': {'id': 'GPL-3.0', 'name': 'GNU General Public License v3.0 only', 'deprecated': True, 'or_later': True},
    'gpl-3.0+': {'id': 'GPL-3.0+', 'name': 'GNU General Public License v3.0 or later', 'deprecated': True, 'or_later': False},
    'gpl-3.0-only': {'id': 'GPL-3.0-only', 'name': 'GNU General Public License v3.0 only', 'deprecated': False, 'or_later': False},
    'gpl-3.0-or-later': {'id': 'GPL-3.0-or-later', 'name': 'GNU General Public License v3.0 or later', 'deprecated': False, 'or_later': False},
    'gpl-3.0-with-autoconf-exception': {'id': 'GPL-3.0-with-autoconf-exception', 'name': 'GNU General Public License v3.0 w/Autoconf exception', 'deprecated': True, 'or_later': False},
    'gpl-3.0-with-gcc-exception': {'id': 'GPL-3.0-with-GCC-exception', 'name': 'GNU General Public License v3.0 w/GCC Runtime Library exception', 'deprecated': True, 'or_later': False},
    'hpnd': {'id': 'HPND', 'name': 'Historical Permission Notice and Disclaimer', 'deprecated': False, 'or_later': False},
    'hpnd-sell-variant': {'id': 'HPND-sell-variant', 'name': 'Historical Permission Notice and Disclaimer - sell variant', 'deprecated': False, 'or_later': False},
    'icu': {'id': 'ICU', 'name': 'ICU License', 'deprecated': False, 'or_later': False},
    'ijg': {'id': 'IJG', 'name': 'Independent JPEG Group License', 'deprecated': False, 'or_later': False},
    'imlib2': {'id': 'Imlib2', 'name': 'Imlib2 License', 'deprecated': False, 'or_later': False},
    'info-zip': {'id': 'Info-ZIP', 'name': 'Info-ZIP License', 'deprecated': False, 'or_later': False},
    'intel': {'id': 'Intel', 'name': 'Intel Open Source License', 'deprecated': False, 'or_later': False},
    'ipa': {'id': 'IPA', 'name': 'IPA Font License', 'deprecated': False, 'or_later': False},
    'ipl-1.0': {'id': 'IPL-1.0', 'name': 'IBM Public License v1.0', 'deprecated': False, 'or_later': True},
    'isc': {'id': 'ISC', 'name': 'ISC License', 'deprecated': False, 'or_later': False},
    'json': {'id': 'JSON', 'name': 'JSON License', 'deprecated': False, 'or_later': False},
    'lgpl-2.0': {'id': 'LGPL-2.0', 'name': 'GNU Library General Public License v2 only', 'deprecated': True, 'or_later': True},
    'lgpl-2.0+': {'id': 'LGPL-2.0+', 'name': 'GNU Library General Public License v2 or later', 'deprecated': True, 'or_later': False},
    'lgpl-2.0-only': {'id': 'LGPL-2.0-only', 'name': 'GNU Library General Public License v2 only', 'deprecated': False, 'or_later': False},
    'lgpl-2.0-or-later': {'id': 'LGPL-2.0-or-later', 'name': 'GNU Library General Public License v2 or later', 'deprecated': False, 'or_later': False},
    'lgpl-2.1': {'id': 'LGPL-2.1', 'name': 'GNU Lesser General Public License v2.1 only', 'deprecated': True, 'or_later': True},
    'lgpl-2.1+': {'id': 'LGPL-2.1+', 'name': 'GNU Lesser General Public License v2.1 or later', 'deprecated': True, 'or_later': False},
    'lgpl-2.1-only': {'id': 'LGPL-2.1-only', 'name': 'GNU Lesser General Public License v2.1 only', 'deprecated': False, 'or_later': False},
    'lgpl-2.1-or-later': {'id': 'LGPL-2.1-or-later', 'name': 'GNU Lesser General Public License v2.1 or later', 'deprecated': False, 'or_later': False},
    'lgpl-3.0': {'id': 'LGPL-3.0', 'name': 'GNU Lesser General Public License v3.0 only', 'deprecated': True, 'or_later': True},
    'lgpl-3.0+': {'id': 'LGPL-3.0+', 'name': 'GNU Lesser General Public License v3.0 or later', 'deprecated': True, 'or_later': False},
    'lgpl-3.0-only': {'id': 'LGPL-3.0-only', 'name': 'GNU Lesser General Public License v3.0 only', 'deprecated': False, 'or_later': False},
    'lgpl-3.0-or-later': {'id': 'LGPL-3.0-or-later', 'name': 'GNU Lesser General Public License v3.0 or later', 'deprecated': False, 'or_later': False},
    'lgpllr': {'id': 'LGPLLR', 'name': 'Lesser General Public License For Linguistic Resources', 'deprecated': False, 'or_later': False},
    'libpng': {'id': 'Libpng', 'name': 'libpng License', 'deprecated': False, 'or_later': False},
    'libpng-2.0': {'id': 'libpng-2.0', 'name': 'PNG Reference Library version 2', 'deprecated': False, 'or_later': True},
    'libtiff': {'id': 'libtiff', 'name': 'libtiff License', 'deprecated': False, 'or_later': False},
    'lpl-1.0': {'id': 'LPL-1.0', 'name': 'Lucent Public License Version 1.0', 'deprecated': False, 'or_later': True},
    'lpl-1.02': {'id': 'LPL-1.02', 'name': 'Lucent Public License v1.02', 'deprecated': False, 'or_later': True},
    'lppl-1.3c': {'id': 'LPPL-1.3c', 'name': 'LaTeX Project Public License v1.3c', 'deprecated': False, 'or_later': True},
    'miros': {'id': 'MirOS', 'name': 'The MirOS Licence', 'deprecated': False, 'or_later': False},
    'mit': {'id': 'MIT', 'name': 'MIT License', 'deprecated': False, 'or_later': False},
    'mit-0': {'id': 'MIT-0', 'name': 'MIT No Attribution', 'deprecated': False, 'or_later': False},
    'mit-cmu': {'id': 'MIT-CMU', 'name': 'CMU License', 'deprecated': False, 'or_later': False},
    'mit-modern-variant': {'id': 'MIT-Modern-Variant', 'name': 'MIT License Modern Variant', 'deprecated': False, 'or_later': False},
    'mitnfa': {'id': 'MITNFA', 'name': 'MIT +no-false-attribs license', 'deprecated': False, 'or_later': False},
    'motosoto': {'id': 'Motosoto', 'name': 'Motosoto License', 'deprecated': False, 'or_later': False},
    'mpl-1.0': {'id': 'MPL-1.0', 'name': 'Mozilla Public License 1.0', 'deprecated': False, 'or_later': True},
    'mpl-1.1': {'id': 'MPL-1.1', 'name': 'Mozilla Public License 1.1', 'deprecated': False, 'or_later': True},
    'mpl-2.0': {'id': 'MPL-2.0', 'name': 'Mozilla Public License 2.0', 'deprecated': False, 'or_later': True},
    'mpl-2.0-no-copyleft-exception': {'id': 'MPL-2.0-no-copyleft-exception', 'name': 'Mozilla Public License 2.0 (no copyleft exception)', 'deprecated': False, 'or_later': False},
    'ms-pl': {'id': 'MS-PL', 'name': 'Microsoft Public License', 'deprecated': False, 'or_later': False},
    'ms-rl': {'id': 'MS-RL', 'name': 'Microsoft Reciprocal License', 'deprecated': False, 'or_later': False},
    'mulanpsl-2.0': {'id': 'MulanPSL-2.0', 'name': 'Mulan Permissive Software License, Version 2', 'deprecated': False, 'or_later': True},
    'multics': {'id': 'Multics', 'name': 'Multics License', 'deprecated': False, 'or_later': False},
    'nasa-1.3': {'id': 'NASA-1.3', 'name': 'NASA Open Source Agreement 1.3', 'deprecated': False, 'or_later': True},
    'naumen': {'id': 'Naumen', 'name': 'Naumen Public License', 'deprecated': False, 'or_later': False},
    'ncsa': {'id': 'NCSA', 'name': 'University of Illinois/NCSA Open Source License', 'deprecated': False, 'or_later': False},
    'ngpl': {'id': 'NGPL', 'name': 'Nethack General Public License', 'deprecated': False, 'or_later': False},
    'nokia': {'id': 'Nokia', 'name': 'Nokia Open Source License', 'deprecated': False, 'or_later': False},
    'npl-1.0': {'id': 'NPL-1.0', 'name': 'Netscape Public License v1.0', 'deprecated': False, 'or_later': True},
    'npl-1.1': {'id': 'NPL-1.1', 'name': 'Netscape Public License v1.1', 'deprecated': False, 'or_later': True},
    'nposl-3.0': {'id': 'NPOSL-3.0', 'name': 'Non-Profit Open Software License 3.0', 'deprecated': False, 'or_later': True},
    'ntp': {'id': 'NTP', 'name': 'NTP License', 'deprecated': False, 'or_later': False},
    'nunit': {'id': 'Nunit', 'name': 'Nunit License', 'deprecated': True, 'or_later': False},
    'oclc-2.0': {'id': 'OCLC-2.0', 'name': 'OCLC Research Public License 2.0', 'deprecated': False, 'or_later': True},
    'odbl-1.0': {'id': 'ODbL-1.0', 'name': 'Open Data Commons Open Database License v1.0', 'deprecated': False, 'or_later': True},
    'odc-by-1.0': {'id': 'ODC-By-1.0', 'name': 'Open Data Commons Attribution License v1.0', 'deprecated': False, 'or_later': True},
    'ofl-1.0': {'id': 'OFL-1.0', 'name': 'SIL Open Font License 1.0', 'deprecated': False, 'or_later': True},
    'ofl-1.1': {'id': 'OFL-1.1', 'name': 'SIL Open Font License 1.1', 'deprecated': False, 'or_later': True},
    'ogtsl': {'id': 'OGTSL', 'name': 'Open Group Test Suite License', 'deprecated': False, 'or_later': False},
    'oldap-2.8': {'id': 'OLDAP-2.8', 'name': 'Open LDAP Public License v2.8', 'deprecated': False, 'or_later': True},
    'openssl': {'id': 'OpenSSL', 'name': 'OpenSSL License', 'deprecated': False, 'or_later': False},
    'oset-pl-2.1': {'id': 'OSET-PL-2.1', 'name': 'OSET Public License version 2.1', 'deprecated': False, 'or_later': True},
    'osl-1.0': {'id': 'OSL-1.0', 'name': 'Open Software License 1.0', 'deprecated': False, 'or_later': True},
    'osl-2.0': {'id': 'OSL-2.0', 'name': 'Open Software License 2.0', 'deprecated': False, 'or_later': True},
    'osl-2.1': {'id': 'OSL-2.1', 'name': 'Open Software License 2.1', 'deprecated': False, 'or_later': True},
    'osl-3.0': {'id': 'OSL-3.0', 'name': 'Open Software License 3.0', 'deprecated': False, 'or_later': True},
    'pddl-1.0': {'id': 'PDDL-1.0', 'name': 'Open Data Commons Public Domain Dedication & License 1.0', 'deprecated': False, 'or_later': True},
    'php-3.0': {'id': 'PHP-3.0', 'name': 'PHP License v3.0', 'deprecated': False, 'or_later': True},
    'php-3.01': {'id': 'PHP-3.01', 'name': 'PHP License v3.01', 'deprecated': False, 'or_later': True},
    'postgresql': {'id': 'PostgreSQL', 'name': 'PostgreSQL License', 'deprecated': False, 'or_later': False},
    'psf-2.0': {'id': 'PSF-2.0', 'name': 'Python Software Foundation License 2.0', 'deprecated': False, 'or_later': True},
    'python-2.0': {'id': 'Python-2.0', 'name': 'Python License 2.0', 'deprecated': False, 'or_later': True},
    'qpl-1.0': {'id': 'QPL-1.0', 'name': 'Q Public License 1.0', 'deprecated': False, 'or_later': True},
    'rpl-1.1': {'id': 'RPL-1.1', 'name': 'Reciprocal Public License 1.1', 'deprecated': False, 'or_later': True},
    'rpl-1.5': {'id': 'RPL-1.5', 'name': 'Reciprocal Public License 1.5', 'deprecated': False, 'or_later': True},
    'rpsl-1.0': {'id': 'RPSL-1.0', 'name': 'RealNetworks Public Source License v1.0', 'deprecated': False, 'or_later': True},
    'rscpl': {'id': 'RSCPL', 'name': 'Ricoh Source Code Public License', 'deprecated': False, 'or_later': False},
    'ruby': {'id': 'Ruby', 'name': 'Ruby License', 'deprecated': False, 'or_later': False},
    'sgi-b-2.0': {'id': 'SGI-B-2.0', 'name': 'SGI Free Software License B v2.0', 'deprecated': False, 'or_later': True},
    'simpl-2.0': {'id': 'SimPL-2.0', 'name': 'Simple Public License 2.0', 'deprecated': False, 'or_later': True},
    'sissl': {'id': 'SISSL', 'name': 'Sun Industry Standards Source License v1.1', 'deprecated': False, 'or_later': False},
    'sleepycat': {'id': 'Sleepycat', 'name': 'Sleepycat License', 'deprecated': False, 'or_later': False},
    'smlnj': {'id': 'SMLNJ', 'name': 'Standard ML of New Jersey License', 'deprecated': False, 'or_later': False},
    'spl-1.0': {'id': 'SPL-1.0', 'name': 'Sun Public License v1.0', 'deprecated': False, 'or_later': True},
    'ssh-openssh': {'id': 'SSH-OpenSSH', 'name': 'SSH OpenSSH license', 'deprecated': False, 'or_later': False},
    'sspl-1.0': {'id': 'SSPL-1.0', 'name': 'Server Side Public License, v 1', 'deprecated': False, 'or_later': True},
    'standardml-nj': {'id': 'StandardML-NJ', 'name': 'Standard ML of New Jersey License', 'deprecated': True, 'or_later': False},
    'tcl': {'id': 'TCL', 'name': 'TCL/TK License', 'deprecated': False, 'or_later': False},
    'ucl-1.0': {'id': 'UCL-1.0', 'name': 'Upstream Compatibility License v1.0', 'deprecated': False, 'or_later': True},
    'unicode-3.0': {'id': 'Unicode-3.0', 'name': 'Unicode License v3', 'deprecated': False, 'or_later': True},
    'unicode-dfs-2015': {'id': 'Unicode-DFS-2015', 'name': 'Unicode License Agreement - Data Files and Software (2015)', 'deprecated': False, 'or_later': False},
    'unicode-dfs-2016': {'id': 'Unicode-DFS-2016', 'name': 'Unicode License Agreement - Data Files and Software (2016)', 'deprecated': False, 'or_later': False},
    'unicode-tou': {'id': 'Unicode-TOU', 'name': 'Unicode Terms of Use', 'deprecated': False, 'or_later': False},
    'unlicense': {'id': 'Unlicense', 'name': 'The Unlicense', 'deprecated': False, 'or_later': False},
    'upl-1.0': {'id': 'UPL-1.0', 'name': 'Universal Permissive License v1.0', 'deprecated': False, 'or_later': True},
    'vim': {'id': 'Vim', 'name': 'Vim License', 'deprecated': False, 'or_later': False},
    'vsl-1.0': {'id': 'VSL-1.0', 'name': 'Vovida Software License v1.0', 'deprecated': False, 'or_later': True},
    'w3c': {'id': 'W3C', 'name': 'W3C Software Notice and License (2002-12-31)', 'deprecated': False, 'or_later': False},
    'w3c-20150513': {'id': 'W3C-20150513', 'name': 'W3C Software Notice and Document License (2015-05-13)', 'deprecated': False, 'or_later': False},
    'watcom-1.0': {'id': 'Watcom-1.0', 'name': 'Sybase Open Watcom Public License 1.0', 'deprecated': False, 'or_later': True},
    'wtfpl': {'id': 'WTFPL', 'name': 'Do What The F*ck You Want To Public License', 'deprecated': False, 'or_later': False},
    'wxwindows': {'id': 'wxWindows', 'name': 'wxWindows Library License', 'deprecated': True, 'or_later': False},
    'x11': {'id': 'X11', 'name': 'X11 License', 'deprecated': False, 'or_later': False},
    'xerox': {'id': 'Xerox', 'name': 'Xerox License', 'deprecated': False, 'or_later': False},
    'xnet': {'id': 'Xnet', 'name': 'X.Net License', 'deprecated': False, 'or_later': False},
    'ypl-1.1': {'id': 'YPL-1.1', 'name': 'Yahoo! Public License v1.1', 'deprecated': False, 'or_later': True},
    'zend-2.0': {'id': 'Zend-2.0', 'name': 'Zend License v2.0', 'deprecated': False, 'or_later': True},
    'zimbra-1.3': {'id': 'Zimbra-1.3', 'name': 'Zimbra Public License v1.3', 'deprecated': False, 'or_later': True},
    'zlib': {'id': 'Zlib', 'name': 'zlib License', 'deprecated': False, 'or_later': False},
    'zlib-acknowledgement': {'id': 'zlib-acknowledgement', 'name': 'zlib/libpng License with Acknowledgement', 'deprecated': False, 'or_later': False},
    'zpl-1.1': {'id': 'ZPL-1.1', 'name': 'Zope Public License 1.1', 'deprecated': False, 'or_later': True},
    'zpl-2.0': {'id': 'ZPL-2.0', 'name': 'Zope Public License 2.0', 'deprecated': False, 'or_later': True},
    'zpl-2.1': {'id': 'ZPL-2.1', 'name': 'Zope Public License 2.1', 'deprecated': False, 'or_later': True},
}

EXCEPTIONS: dict[str, SPDXException] = {
    '389-exception': {'id': '389-exception', 'deprecated': False},
    'autoconf-exception-2.0': {'id': 'Autoconf-exception-2.0', 'deprecated': False},
    'autoconf-exception-3.0': {'id': 'Autoconf-exception-3.0', 'deprecated': False},
    'bison-exception-2.2': {'id': 'Bison-exception-2.2', 'deprecated': False},
    'bootloader-exception': {'id': 'Bootloader-exception', 'deprecated': False},
    'classpath-exception-2.0': {'id': 'Classpath-exception-2.0', 'deprecated': False},
    'clisp-exception-2.0': {'id': 'CLISP-exception-2.0', 'deprecated': False},
    'digirule-foss-exception': {'id': 'DigiRule-FOSS-exception', 'deprecated': False},
    'ecos-exception-2.0': {'id': 'eCos-exception-2.0', 'deprecated': False},
    'fawkes-runtime-exception': {'id': 'Fawkes-Runtime-exception', 'deprecated': False},
    'fltk-exception': {'id': 'FLTK-exception', 'deprecated': False},
    'font-exception-2.0': {'id': 'Font-exception-2.0', 'deprecated': False},
    'freertos-exception-2.0': {'id': 'freertos-exception-2.0', 'deprecated': False},
    'gcc-exception-2.0': {'id': 'GCC-exception-2.0', 'deprecated': False},
    'gcc-exception-3.1': {'id': 'GCC-exception-3.1', 'deprecated': False},
    'gnu-javamail-exception': {'id': 'gnu-javamail-exception', 'deprecated': False},
    'gpl-3.0-linking-exception': {'id': 'GPL-3.0-linking-exception', 'deprecated': False},
    'gpl-3.0-linking-source-exception': {'id': 'GPL-3.0-linking-source-exception', 'deprecated': False},
    'gpl-cc-1.0': {'id': 'GPL-CC-1.0', 'deprecated': False},
    'i2p-gpl-java-exception': {'id': 'i2p-gpl-java-exception', 'deprecated': False},
    'libtool-exception': {'id': 'Libtool-exception', 'deprecated': False},
    'linux-syscall-note': {'id': 'Linux-syscall-note', 'deprecated': False},
    'llvm-exception': {'id': 'LLVM-exception', 'deprecated': False},
    'lzma-exception': {'id': 'LZMA-exception', 'deprecated': False},
    'mif-exception': {'id': 'mif-exception', 'deprecated': False},
    'nokia-qt-exception-1.1': {'id': 'Nokia-Qt-exception-1.1', 'deprecated': True},
    'ocaml-lgpl-linking-exception': {'id': 'OCaml-LGPL-linking-exception', 'deprecated': False},
    'occt-exception-1.0': {'id': 'OCCT-exception-1.0', 'deprecated': False},
    'openjdk-assembly-exception-1.0': {'id': 'OpenJDK-assembly-exception-1.0', 'deprecated': False},
    'openvpn-openssl-exception': {'id': 'openvpn-openssl-exception', 'deprecated': False},
    'ps-or-pdf-font-exception-20170817': {'id': 'PS-or-PDF-font-exception-20170817', 'deprecated': False},
    'qt-gpl-exception-1.0': {'id': 'Qt-GPL-exception-1.0', 'deprecated': False},
    'qt-lgpl-exception-1.1': {'id': 'Qt-LGPL-exception-1.1', 'deprecated': False},
    'qwt-exception-1.0': {'id': 'Qwt-exception-1.0', 'deprecated': False},
    'swift-exception': {'id': 'Swift-exception', 'deprecated': False},
    'u-boot-exception-2.0': {'id': 'u-boot-exception-2.0', 'deprecated': False},
    'universal-foss-exception-1.0': {'id': 'Universal-FOSS-exception-1.0', 'deprecated': False},
    'wxwindows-exception-3.1': {'id': 'WxWindows-exception-3.1', 'deprecated': False},
}
