# %% [markdown]
# # stringmetrics quickstart
#
# Edit distances, similarity scores, Unicode normalization and "did you mean"
# suggestions in a few lines each.
#
# | Part | Topic |
# |------|-------|
# | 1 | Distances and similarities |
# | 2 | Normalization |
# | 3 | Substring matching |
# | 4 | Suggestions |
# | 5 | Polars |

# %%
import polars as pl

import stringmetrics as sm

# %% [markdown]
# ## Part 1: Distances and similarities
#
# OSA counts an adjacent transposition as one edit; unrestricted
# Damerau-Levenshtein may also edit between the transposed characters.

# %%
for metric in ["levenshtein", "osa", "damerau_levenshtein", "indel"]:
    print(f"{metric:>20}: {sm.distance(metric, 'CA', 'ABC')}")

print(sm.levenshtein_result("kitten", "sitting"))
print(f"jaro_winkler(MARTHA, MARHTA) = {sm.jaro_winkler('MARTHA', 'MARHTA'):.4f}")
print(f"partial_ratio(cat, concatenate) = {sm.partial_ratio('cat', 'concatenate')}")

# %% [markdown]
# ## Part 2: Normalization
#
# Presets go from "none" to "aggressive"; case folding understands the
# Turkish dotted and dotless i.

# %%
for preset in sm.NormalizationPreset:
    print(f"{preset.value:>10}: {sm.normalize('  Crème Brûlée!  ', preset)!r}")

print(sm.normalize("ISTANBUL", "default"), sm.normalize("ISTANBUL", "default", locale="tr"))

# %% [markdown]
# ## Part 3: Substring matching

# %%
match = sm.substring_similarity("cat", "concatenate")
print(match.score, match.range, match.range.slice("concatenate"))

# %% [markdown]
# ## Part 4: Suggestions
#
# Candidates are normalized, scored, filtered by min_score and sorted by
# score; ties keep the candidate order.

# %%
commands = ["commit", "checkout", "cherry-pick", "clone", "config"]
for suggestion in sm.rank("comit", commands, prefer_prefix=True):
    print(f"{suggestion.value:<12} {suggestion.score:.3f}  {suggestion.reason}")

config = sm.SuggestionConfig(metric="substring", min_score=0.3)
for suggestion in sm.rank("pick", commands, config):
    print(suggestion.value, suggestion.matched_range)

# %% [markdown]
# ## Part 5: Polars

# %%
df = pl.DataFrame({"typed": ["comit", "chekout", "clne", "xyz"]})
print(
    df.with_columns(
        suggestion=pl.col("typed").strsim.best_match(commands, min_score=0.5),
        distance=pl.col("typed").strsim.distance("commit"),
    )
)

print(sm.rank_series(df["typed"], commands, min_score=0.5, max_suggestions=2))
