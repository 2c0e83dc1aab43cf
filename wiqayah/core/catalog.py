"""
Built-in dhikr library.

The catalog is a fixed, ordered set of requirements. The module constants
carry the default acceptance thresholds; ``build_catalog`` re-applies the
configured ones. Tier policies pick from it by id; debt never edits an
entry, it derives a multiplied copy.
"""

from typing import Optional

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.exceptions import UnknownDhikrError
from wiqayah.models.dhikr import DhikrCategory, DhikrRequirement

SUBHANALLAH = DhikrRequirement(
    id="subhanallah",
    display_name="Subhanallah",
    script_text="سُبْحَانَ ٱللَّٰهِ",
    transliteration="Subhanallah",
    repetitions=3,
    acceptance_threshold=0.7,
    category=DhikrCategory.SIMPLE,
)

ALHAMDULILLAH = DhikrRequirement(
    id="alhamdulillah",
    display_name="Alhamdulillah",
    script_text="ٱلْحَمْدُ لِلَّٰهِ",
    transliteration="Alhamdulillah",
    repetitions=3,
    acceptance_threshold=0.7,
    category=DhikrCategory.SIMPLE,
)

ALLAHU_AKBAR = DhikrRequirement(
    id="allahu_akbar",
    display_name="Allahu Akbar",
    script_text="ٱللَّٰهُ أَكْبَرُ",
    transliteration="Allahu Akbar",
    repetitions=3,
    acceptance_threshold=0.7,
    category=DhikrCategory.SIMPLE,
)

AYAT_AL_KURSI = DhikrRequirement(
    id="ayat_al_kursi",
    display_name="Ayat al-Kursi",
    script_text=(
        "ٱللَّهُ لَآ إِلَٰهَ إِلَّا هُوَ ٱلْحَىُّ ٱلْقَيُّومُ ۚ لَا تَأْخُذُهُۥ سِنَةٌ وَلَا نَوْمٌ ۚ لَّهُۥ مَا فِى ٱلسَّمَٰوَٰتِ وَمَا فِى ٱلْأَرْضِ ۗ مَن ذَا ٱلَّذِى يَشْفَعُ عِندَهُۥٓ إِلَّا بِإِذْنِهِۦ ۚ يَعْلَمُ مَا بَيْنَ أَيْدِيهِمْ وَمَا خَلْفَهُمْ ۖ وَلَا يُحِيطُونَ بِشَىْءٍ مِّنْ عِلْمِهِۦٓ إِلَّا بِمَا شَآءَ ۚ وَسِعَ كُرْسِيُّهُ ٱلسَّمَٰوَٰتِ وَٱلْأَرْضَ ۖ وَلَا يَـُٔودُهُۥ حِفْظُهُمَا ۚ وَهُوَ ٱلْعَلِىُّ ٱلْعَظِيمُ"
    ),
    transliteration=(
        "Allahu la ilaha illa huwal hayyul qayyum. La ta'khuzuhu sinatun wa la nawm. "
        "Lahu ma fis samawati wa ma fil ard. Man zal lazi yashfa'u 'indahu illa bi iznih. "
        "Ya'lamu ma bayna aydihim wa ma khalfahum. Wa la yuhituna bi shay'im min 'ilmihi "
        "illa bima sha'. Wasi'a kursiyyuhus samawati wal ard. Wa la ya'uduhu hifzuhuma "
        "wa huwal 'aliyyul 'azim."
    ),
    repetitions=1,
    acceptance_threshold=0.75,
    category=DhikrCategory.VERSE,
)

KAHF_FIRST_5 = DhikrRequirement(
    id="kahf_first_5",
    display_name="Surah al-Kahf (First 5 Ayat)",
    script_text=(
        "ٱلْحَمْدُ لِلَّهِ ٱلَّذِىٓ أَنزَلَ عَلَىٰ عَبْدِهِ ٱلْكِتَـٰبَ وَلَمْ يَجْعَل لَّهُۥ عِوَجَا ۜ ﴿١﴾ قَيِّمًا لِّيُنذِرَ بَأْسًا شَدِيدًا مِّن لَّدُنْهُ وَيُبَشِّرَ ٱلْمُؤْمِنِينَ ٱلَّذِينَ يَعْمَلُونَ ٱلصَّـٰلِحَـٰتِ أَنَّ لَهُمْ أَجْرًا حَسَنًا ﴿٢﴾ مَّـٰكِثِينَ فِيهِ أَبَدًا ﴿٣﴾ وَيُنذِرَ ٱلَّذِينَ قَالُوا۟ ٱتَّخَذَ ٱللَّهُ وَلَدًا ﴿٤﴾ مَّا لَهُم بِهِۦ مِنْ عِلْمٍ وَلَا لِـَٔابَآئِهِمْ ۚ كَبُرَتْ كَلِمَةً تَخْرُجُ مِنْ أَفْوَٰهِهِمْ ۚ إِن يَقُولُونَ إِلَّا كَذِبًا ﴿٥﴾"
    ),
    transliteration=(
        "Alhamdu lillahil lazi anzala 'ala 'abdihi al-kitaba wa lam yaj'al lahu 'iwaja. "
        "Qayyiman liyunzira ba'san shadidan min ladunhu wa yubashshiral mu'mininal lazina "
        "ya'maluna as-salihati anna lahum ajran hasana. Makisina fihi abada. Wa yunziral "
        "lazina qalut takhaza Allahu walada. Ma lahum bihi min 'ilmin wa la li aba'ihim. "
        "Kaburat kalimatan takhruju min afwahihim. In yaquluna illa kaziba."
    ),
    repetitions=1,
    acceptance_threshold=0.7,
    category=DhikrCategory.CHAPTER,
)

MORNING_ADHKAR = DhikrRequirement(
    id="morning_adhkar",
    display_name="Morning Adhkar Set",
    script_text=(
        "أَصْبَحْنَا وَأَصْبَحَ الْمُلْكُ لِلَّهِ، وَالْحَمْدُ لِلَّهِ، لاَ إِلَـهَ إِلاَّ اللهُ وَحْدَهُ لاَ شَرِيْكَ لَهُ، لَهُ الْمُلْكُ وَلَهُ الْحَمْدُ وَهُوَ عَلَى كُلِّ شَيْءٍ قَدِيْرٌ"
    ),
    transliteration=(
        "Asbahna wa asbahal mulku lillah, walhamdu lillah, la ilaha illallahu wahdahu "
        "la sharika lah, lahul mulku wa lahul hamdu wa huwa 'ala kulli shay'in qadir."
    ),
    repetitions=1,
    acceptance_threshold=0.7,
    category=DhikrCategory.SET,
)

# Catalog order is the order entries are listed to users
CATALOG: dict[str, DhikrRequirement] = {
    dhikr.id: dhikr
    for dhikr in (
        SUBHANALLAH,
        ALHAMDULILLAH,
        ALLAHU_AKBAR,
        AYAT_AL_KURSI,
        KAHF_FIRST_5,
        MORNING_ADHKAR,
    )
}


# Entries judged with settings.strict_threshold; all others use default_threshold
STRICT_IDS = frozenset({AYAT_AL_KURSI.id})


def build_catalog(settings: Optional[WiqayahSettings] = None) -> dict[str, DhikrRequirement]:
    """
    Catalog with acceptance thresholds taken from settings.

    Args:
        settings: Settings to read thresholds from (defaults to get_settings())

    Returns:
        Ordered mapping of id to requirement
    """
    settings = settings or get_settings()
    catalog = {}
    for dhikr_id, dhikr in CATALOG.items():
        threshold = (
            settings.strict_threshold if dhikr_id in STRICT_IDS else settings.default_threshold
        )
        if threshold != dhikr.acceptance_threshold:
            dhikr = dhikr.model_copy(update={"acceptance_threshold": threshold})
        catalog[dhikr_id] = dhikr
    return catalog


def get_dhikr(dhikr_id: str, settings: Optional[WiqayahSettings] = None) -> DhikrRequirement:
    """
    Look up a catalog entry by id.

    Args:
        dhikr_id: Catalog identifier (e.g. "ayat_al_kursi")
        settings: Settings to read thresholds from

    Returns:
        The catalog requirement

    Raises:
        UnknownDhikrError: If the id is not in the catalog
    """
    try:
        return build_catalog(settings)[dhikr_id]
    except KeyError:
        raise UnknownDhikrError(dhikr_id) from None


def list_dhikr(
    category: Optional[DhikrCategory] = None,
    settings: Optional[WiqayahSettings] = None,
) -> list[DhikrRequirement]:
    """
    List catalog entries in catalog order, optionally filtered by category.
    """
    return [
        d for d in build_catalog(settings).values()
        if category is None or d.category == category
    ]


def with_multiplier(requirement: DhikrRequirement, multiplier: int) -> DhikrRequirement:
    """
    Derive a copy of requirement with ``repetitions * multiplier`` repetitions.

    Args:
        requirement: Base requirement
        multiplier: Factor to apply (>= 1)

    Returns:
        A new requirement; the catalog entry is untouched
    """
    return requirement.with_multiplier(multiplier)
