# videorating

An interactive console catalog of movies and series episodes. It reads a
movies file and a series file (by default `movies.csv` and `series.csv`
in the current directory), lists every video, searches by genre, rating
or series, and collects ratings from 1 to 5. The menu speaks Spanish.

## Installing

```
pip install .
```

## Data files

Both files are read as UTF-8. Each starts with a header line, which is
skipped. Every other line is one record, with its fields separated by
commas and none of them empty. A single trailing comma at the end of a
line is ignored.

The movies file has four fields:

```
id,name,duration,genre
M1,Inception,148,SciFi
```

The series file has six fields; `name` is the name of the series:

```
id,name,duration,genre,episode title,season
E1,Dark,60,Drama,Secrets,1
```

The duration and the season must start with a whole number. If a file
cannot be opened, has no header, or holds a malformed line, loading fails
and the program exits.

## Running

Run the command from the directory that holds both files:

```
videorating
```

or point it at other files:

```
videorating --movies peliculas.csv --series episodios.csv
```

The menu offers these options:

1. Load the data files
2. Show every video
3. Show videos with a given genre or a given rating
4. Show the episodes of a series with a given rating
5. Show the movies with a given rating
6. Rate a video by its id
0. Quit

Options 2 to 6 require the data to be loaded first. Options 3 to 6 list
the whole catalog before asking for input. Searched ratings must lie
between 1 and 5; a rating given to a video must be a whole number from 1
to 5. Genre, series name and id are read as single words.

A video's rating starts at 0. Each new score is added to a running total,
and the rating becomes the whole-number quotient of that total by the
number of scores received.

## Using it as a library

```python
from videorating.catalog import Catalog

catalog = Catalog()
movies, episodes = catalog.load("movies.csv", "series.csv")
catalog.rate("M1", 5)
for video in catalog.by_rating(5):
    print(video.describe())
```

- `Catalog.load` returns the number of movies and episodes read and
  raises `CatalogError` on any problem with the files.
- `Catalog.by_genre`, `Catalog.by_rating`, `Catalog.episodes(series,
  rating)` and `Catalog.movies(rating)` return the matching videos in
  catalog order: movies first, then episodes.
- `Catalog.rate` raises `KeyError` when no video has the given id.
- `parse_movie` and `parse_episode` turn one CSV line into a `Movie` or
  `Episode`; `count_records` counts the lines after a file's header.
- `videorating.menu.Menu` runs the same menu over any input and output
  streams.

## What it does not do

Ratings live only in memory. Nothing is written back to the data files,
so every rating is lost when the program exits.