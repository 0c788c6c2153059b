# logregkit

Binary logistic regression trained with batch gradient descent on numeric CSV
data. It has two commands. `logreg` trains a model and `logreg-predict`
classifies rows with a saved model. It uses only the standard library.

## Installation

    pip install .

## Input data

Each row holds numeric feature columns and ends with a label column, which is
`0` or `1`. The separator is `;` by default.

- The column count comes from the first line that contains a separator. Every
  later row must have the same number of separators, or parsing fails.
- A line counts as a row only if it contains a separator and ends with a
  newline. End the file with a newline, or its last line is not read.
- A value may have leading whitespace and may be followed by whitespace. Any
  other trailing text is an error. `inf` and `nan` are accepted.

## Training

    logreg data.csv --output model.csv

Options:

- `-l`, `--learning-rate` sets the learning rate. The default is 0.001.
- `-i`, `--iterations` sets the number of gradient descent iterations. The default is 1000.
- `-s`, `--split` sets the share of the rows used for training. It must be in (0, 1]. The default is 0.8.
- `--separator` sets the CSV separator. Only its first character is used. The default is `;`.
- `--skip-header` makes the command ignore the first line.
- `--seed` sets the seed for the shuffle. A value of 0, the default, means the current time.
- `--file` gives the input file. You can also pass it as a positional argument, which takes precedence.
- `-o`, `--output` gives the model file. Without it, the model is written to standard error.

The command first prints how many rows went to training and how many to
validation. It shuffles the rows with the seed, and then the first share
becomes the training part. The features of both parts are standardised with the
mean and population standard deviation of the training part. A column with a
standard deviation of zero is left as it is. The weights start at zero. After
each iteration the command prints a line like this:

    [0000] train: 0.693000, valid: 0.690000, accuracy: 0.800000, precision: 0.750000, recall: 1.000000, f1: 0.857143

The line gives the training and validation cross-entropy costs, then the
accuracy, precision, recall and F1 on the validation part, with a threshold of
0.5. A ratio whose denominator is zero is shown as `nan` or `inf`. At the end
the command prints the learned weights, bias first.

The command exits with status 1 in these cases: there is no input file, the
split is invalid, the file cannot be opened or parsed, the file has no rows,
or the file has fewer than two columns.

### Model file

The model file has three `;`-separated lines, written with 14 decimal places:

1. the feature means, followed by a trailing `0`
2. the feature standard deviations, followed by a trailing `0`
3. the weights, with the bias weight first

## Prediction

    logreg-predict --model model.csv new_data.csv

- `-m`, `--model` gives the model file. Without it, the model is read from standard input.
- `--file` or a positional argument gives the input file. Without it, the input is read from standard input.
- `-s`, `--separator` sets the CSV separator of the input. The default is `;`. The model file always uses `;`.
- `--skip-header` makes the command ignore the first line of the input.

The input must have as many columns as the model, and that count includes the
label column. The label values are not used. The rows are standardised with
the model's means and deviations. Each row produces one line like this:

    [00000] 1 (0.87321)

The line holds the row index, the predicted class (1 when the probability is at
least 0.5) and the probability. The command exits with status 1 in these cases:
the input or the model cannot be read, the model has fewer than three rows, or
the column counts do not match.

## Library use

    from logregkit.csvparse import parse_csv
    from logregkit.model import Model, cost, evaluate
    from logregkit.predict import predict
    from logregkit.train import train

    with open("data.csv") as stream:
        dataset = parse_csv(stream, ";", False)

    train_set, valid_set = dataset.split(0.8, seed=42)
    means, stddevs = train_set.means_stddevs()
    train_set.normalize(means, stddevs)
    valid_set.normalize(means, stddevs)

    theta = train(train_set, learning_rate=0.01, iterations=500, valid=valid_set)
    print(cost(theta, valid_set), evaluate(theta, valid_set).f1)

    with open("model.csv", "w") as out:
        Model(means, stddevs, theta).write(out)

The modules provide these names:

- `logregkit.dataset.Dataset` holds rows of `n` columns. It provides `m`,
  `means_stddevs()`, `normalize(means, stddevs)`, `split(ratio, seed)` and
  `format()`. Both `normalize` and `split` change the dataset in place.
- `logregkit.csvparse` provides `parse_csv(stream, separator, skip_header)` and
  `csv_size(...)`. Both raise `CsvError` on malformed input.
- `logregkit.model` provides `compute_hypothesis`, `cost`, `evaluate` (which
  returns a `Metrics` with `tp`, `tn`, `fp`, `fn`, `accuracy`, `precision`,
  `recall` and `f1`) and `gradient_step`. It also provides `Model` with
  `write`, `read` and `from_rows`, and `ModelError`.
- `logregkit.train.train(dataset, learning_rate, iterations, valid, report)`
  runs gradient descent. The optional `report` callable receives the
  iteration number, the training cost, the validation cost and the validation
  `Metrics`.
- `logregkit.predict.predict(dataset, model)` normalises the dataset in place
  and returns one `(label, probability)` pair for each row.

## Limits

The package covers plain binary logistic regression only. It has no
regularisation, no multi-class support and no early stopping, and it keeps the
whole dataset in memory.