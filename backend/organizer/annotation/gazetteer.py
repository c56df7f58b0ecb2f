"""Word lists backing the rule-based annotator."""

from __future__ import annotations

from organizer.lexicon import ACTION_VERBS

# Unambiguous given names only; names that double as common words are left out.
FIRST_NAMES: frozenset[str] = frozenset(
    {
        "aaron", "adam", "alex", "alice", "amanda", "amy", "andrew", "angela", "anna",
        "anthony", "ashley", "barbara", "ben", "benjamin", "betty", "brian", "carlos",
        "carol", "catherine", "charles", "chris", "christopher", "daniel", "david",
        "deborah", "diana", "donna", "edward", "elizabeth", "emily", "emma", "eric",
        "ethan", "george", "hannah", "helen", "henry", "isabella", "jacob", "james",
        "jason", "jennifer", "jessica", "joe", "john", "jonathan", "joseph", "joshua",
        "julia", "karen", "kate", "katherine", "kevin", "kimberly", "laura", "linda",
        "lisa", "luke", "maria", "mary", "matthew", "megan", "melissa", "michael",
        "michelle", "mike", "nancy", "nicholas", "nicole", "olivia", "oliver", "patricia",
        "paul", "peter", "priya", "rachel", "raj", "rebecca", "richard", "robert", "ryan",
        "samantha", "sandra", "sarah", "sophia", "stephanie", "steve", "steven", "susan",
        "thomas", "timothy", "tom", "victoria", "william", "zoe",
    }
)

HONORIFICS: frozenset[str] = frozenset({"mr", "mrs", "ms", "dr", "prof"})

# Abbreviations that end in a period without ending the sentence.
NON_TERMINAL_ABBREVIATIONS: frozenset[str] = HONORIFICS | frozenset({"st", "sr", "jr", "vs", "e.g", "i.e"})

PLACES: frozenset[str] = frozenset(
    {
        "new york", "san francisco", "los angeles", "las vegas", "san diego", "new jersey",
        "new mexico", "north carolina", "south carolina", "rhode island", "west virginia",
        "united states", "united kingdom", "hong kong", "new delhi", "south africa",
        "new zealand", "costa rica", "puerto rico", "london", "paris", "berlin", "tokyo",
        "chicago", "boston", "seattle", "denver", "austin", "dallas", "houston", "miami",
        "atlanta", "phoenix", "portland", "toronto", "vancouver", "montreal", "sydney",
        "melbourne", "dublin", "madrid", "rome", "amsterdam", "brussels", "vienna", "prague",
        "lisbon", "barcelona", "mumbai", "delhi", "beijing", "shanghai", "singapore", "dubai",
        "mexico", "canada", "france", "germany", "spain", "italy", "japan", "china", "india",
        "brazil", "australia", "ireland", "england", "scotland", "wales", "portugal",
        "europe", "asia", "africa", "california", "texas", "florida", "oregon", "colorado",
        "ohio", "michigan", "georgia", "virginia", "washington", "arizona", "nevada",
        "utah", "alaska", "hawaii", "massachusetts", "pennsylvania", "illinois",
    }
)

ORGANIZATIONS: frozenset[str] = frozenset(
    {
        "google", "microsoft", "amazon", "facebook", "netflix", "tesla", "ibm", "nasa",
        "fbi", "nato", "spotify", "uber", "airbnb", "twitter", "linkedin", "salesforce",
        "oracle", "intel", "nvidia", "samsung", "sony", "toyota", "walmart", "starbucks",
        "costco", "ikea", "harvard", "stanford", "mit", "yale", "openai", "github",
    }
)

ORGANIZATION_SUFFIXES: tuple[str, ...] = (
    "Inc", "Corp", "Corporation", "LLC", "Ltd", "Company", "Co", "Group", "University",
    "College", "Institute", "Foundation", "Bank", "Agency", "Association",
)

NUMBER_WORDS: frozenset[str] = frozenset(
    {
        "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten", "eleven",
        "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen",
        "nineteen", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
        "ninety", "hundred", "thousand", "million", "billion",
    }
)

DETERMINERS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "my", "your", "our", "their", "his", "her", "its", "this", "that",
        "these", "those", "some", "every", "each", "any", "another",
    }
)

STOPWORDS: frozenset[str] = DETERMINERS | frozenset(
    {
        "i", "me", "we", "us", "you", "he", "him", "she", "they", "them", "it", "and",
        "or", "but", "so", "if", "then", "than", "to", "of", "in", "on", "at", "by", "for",
        "with", "about", "from", "into", "over", "after", "before", "up", "down", "out",
        "off", "is", "are", "was", "were", "be", "been", "am", "do", "does", "did", "will",
        "would", "can", "could", "should", "must", "might", "may", "not", "no", "yes",
        "also", "just", "very", "really", "too", "as", "there", "here", "what", "when",
        "where", "who", "why", "how", "which", "all", "more", "most", "other", "such",
        "only", "own", "same", "now", "again", "once", "today", "tomorrow", "tonight",
        "yesterday", "said", "says",
    }
)

CALENDAR_NAMES: frozenset[str] = frozenset(
    {
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        "january", "february", "march", "april", "may", "june", "july", "august",
        "september", "october", "november", "december",
    }
)

BASE_VERBS: tuple[str, ...] = ACTION_VERBS + (
    "go", "get", "make", "do", "have", "need", "want", "think", "know", "see", "look",
    "come", "take", "give", "tell", "talk", "use", "find", "work", "try", "leave", "feel",
    "start", "stop", "plan", "discuss", "decide", "remember", "forget", "pay", "visit",
    "learn", "move", "bring", "build", "fill", "share", "finalize", "deliver", "launch",
    "ship", "test", "improve", "hire", "present", "explain", "help", "keep", "run",
    "wrap", "watch", "listen", "call", "text", "repair", "grab", "cook", "wash",
)

IRREGULAR_VERB_FORMS: frozenset[str] = frozenset(
    {
        "went", "gone", "got", "gotten", "made", "did", "done", "had", "has", "took",
        "taken", "gave", "given", "told", "came", "saw", "seen", "knew", "known", "thought",
        "found", "left", "felt", "met", "paid", "sent", "bought", "wrote", "written",
        "began", "begun", "brought", "built", "spoke", "spoken", "said", "ran", "kept",
    }
)


def _inflections(base: str) -> set[str]:
    forms = {base, f"{base}s", f"{base}es", f"{base}ed", f"{base}d", f"{base}ing"}
    if base.endswith("e"):
        forms.add(f"{base[:-1]}ing")
    if base.endswith("y") and len(base) > 2 and base[-2] not in "aeiou":
        forms.update({f"{base[:-1]}ies", f"{base[:-1]}ied"})
    if len(base) >= 3 and base[-1] not in "aeiouwxy" and base[-2] in "aeiou" and base[-3] not in "aeiou":
        forms.update({f"{base}{base[-1]}ed", f"{base}{base[-1]}ing"})
    return forms


VERB_FORMS: frozenset[str] = frozenset(
    form for base in BASE_VERBS for form in _inflections(base)
) | IRREGULAR_VERB_FORMS
